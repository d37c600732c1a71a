"""
Manual smoke test for a running University Data server.

Start the server first (``python api.py``), then run this script.
"""

import asyncio
import os

from university_data.client import UniversityDataClient, UniversityDataClientError

API_BASE = os.getenv("API_BASE", "http://localhost:3000")


async def main():
    async with UniversityDataClient(API_BASE) as client:
        # 1. Capability document
        print("Fetching API schema...")
        schema = await client.get_schema()
        print("Available endpoints:", [endpoint["path"] for endpoint in schema["endpoints"]])

        # 2. Search for universities in California
        print("\nSearching for universities in California...")
        search_results = await client.search_universities(state="CA", limit=5)
        results = search_results["data"]["results"]
        print(
            f"Found {search_results['data']['total_count']} universities in CA. "
            f"Showing {len(results)} results:"
        )

        first_name = None
        for index, result in enumerate(results, 1):
            print(
                f"{index}. {result.get('name') or 'Unknown'} "
                f"({result.get('city') or 'Unknown'}, {result.get('state') or 'Unknown'})"
            )
            if index == 1:
                first_name = result.get("name")
                print(f"   ID: {result.get('objectid')}")
                print(f"   Population: {result.get('population')}")

        # 3. Available fields
        print("\nFetching available fields...")
        fields = (await client.get_fields())["data"]
        names = ", ".join(field["name"] for field in fields[:5])
        print(f"Available fields: {names}... ({len(fields)} total fields)")

        # 4. Count by state
        print("\nCounting universities by state...")
        try:
            statistics = await client.get_statistics(
                field="objectid", aggregation="count", groupBy="state"
            )
            rows = [
                row
                for row in statistics["data"].get("results", [])
                if row.get("state") is not None and row.get("count") is not None
            ]
            if rows:
                print("Top 5 states by university count:")
                top_states = sorted(rows, key=lambda row: row["count"], reverse=True)[:5]
                for index, row in enumerate(top_states, 1):
                    print(f"{index}. {row['state']}: {row['count']} universities")
            else:
                print("No statistics data available")
        except UniversityDataClientError as e:
            print(f"Could not fetch count statistics: {e.message}")

        # 5. Details by name
        if first_name:
            print(f"\nFetching details for university name: {first_name}...")
            try:
                university = (await client.get_university_by_name(first_name))["data"]
                print("University details:")
                print(f"Name: {university.get('name') or 'Unknown'}")
                print(
                    f"Location: {university.get('city') or 'Unknown'}, "
                    f"{university.get('state') or 'Unknown'}"
                )
                print(f"Address: {university.get('address') or 'Unknown'}")
                print(f"Telephone: {university.get('telephone') or 'Unknown'}")
                print(f"Population: {university.get('population') or 'Unknown'}")
                print(f"Type: {university.get('type') or 'Unknown'}")
            except UniversityDataClientError as e:
                print(f"Could not fetch university details: {e.message}")


if __name__ == "__main__":
    asyncio.run(main())
