"""
Basic idmclient usage example.

This example demonstrates the organizations API:
- Creating an organization
- Paging through organizations
- Updating and deleting an organization
- The callback calling convention

Run with:
    python examples/basic_usage.py
"""

import asyncio

from idmclient import APIError, ManagementClient


async def main():
    # Create client (loads config from .env or IDM_* variables)
    async with await ManagementClient.create() as client:
        # =================================================================
        # 1. Create Organization
        # =================================================================
        print("Creating organization...")

        org = await client.organizations.create(
            {
                "name": "acme-corp",
                "display_name": "Acme Corporation",
                "metadata": {"tier": "pro"},
            }
        )
        print(f"  Created org: {org['display_name']} (ID: {org['id']})")

        # =================================================================
        # 2. List Organizations
        # =================================================================
        print("\nListing organizations...")

        page = 0
        while True:
            orgs = await client.organizations.get_all({"per_page": 50, "page": page})
            for item in orgs:
                print(f"  {item['id']}: {item['name']}")
            if len(orgs) < 50:
                break
            page += 1

        # =================================================================
        # 3. Update Organization
        # =================================================================
        print("\nUpdating organization...")

        org = await client.organizations.update(
            {"id": org["id"]}, {"display_name": "Acme Inc"}
        )
        print(f"  New display name: {org['display_name']}")

        # =================================================================
        # 4. Callback Style
        # =================================================================
        print("\nFetching with a callback...")

        done = asyncio.Event()

        def on_org(err, result):
            if err:
                print(f"  Error: {err}")
            else:
                print(f"  Fetched: {result['name']}")
            done.set()

        client.organizations.get({"id": org["id"]}, callback=on_org)
        await done.wait()

        # =================================================================
        # 5. Delete Organization
        # =================================================================
        print("\nDeleting organization...")

        await client.organizations.delete({"id": org["id"]})
        print("  Deleted")

        try:
            await client.organizations.get({"id": org["id"]})
        except APIError as e:
            print(f"  Lookup after delete: {e.status_code} {e.message}")


if __name__ == "__main__":
    asyncio.run(main())
