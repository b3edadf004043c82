"""
Seed product categories through the running page.

Reads category names from categories.json (a list of strings or of
{"name": ...} objects) and submits each one to the /page form, exactly like a
user would. Names rejected by the form are reported and skipped.
"""
import asyncio
import json
import os
import re
import sys

import httpx
from dotenv import load_dotenv

load_dotenv()
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
CATEGORIES_FILE = os.getenv("CATEGORIES_FILE", "categories.json")
PAGE_PATH = "/page"


def load_category_names(path: str):
    with open(path, "r") as f:
        data = json.load(f)
    return [item["name"] if isinstance(item, dict) else str(item) for item in data]


async def seed_categories() -> int:
    try:
        names = load_category_names(CATEGORIES_FILE)
    except FileNotFoundError:
        print(f"Error: {CATEGORIES_FILE} not found.")
        return 1

    async with httpx.AsyncClient(base_url=API_BASE_URL) as client:
        try:
            print(f"Checking API health at {API_BASE_URL}/health_check...")
            health_response = await client.get("/health_check")
            health_response.raise_for_status()
        except (httpx.RequestError, httpx.HTTPStatusError) as e:
            print(f"Error: API health check failed: {e}")
            return 1

        added = 0
        for name in names:
            try:
                response = await client.post(PAGE_PATH, data={"ptype": name})
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                print(f"Error adding '{name}': HTTP {e.response.status_code}")
                continue
            if re.search(rf"Product Category {re.escape(name)} added", response.text):
                print(f"Added category: {name}")
                added += 1
            else:
                print(f"Category '{name}' was rejected by the form. Skipping.")

    print(f"\nDone: {added} of {len(names)} categories added.")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(seed_categories()))
