"""
httpreq Quickstart Example
"""

import asyncio
import os

from httpreq import ClientConfig, HttpRequestClient


class GitHubClient(HttpRequestClient):
    """Small API client built on top of HttpRequestClient"""

    def __init__(self, token=None):
        headers = {"Accept": "application/vnd.github+json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        super().__init__(
            ClientConfig(
                base_url="https://api.github.com",
                timeout_millis=5000,
                default_headers=headers,
                debug=True,
            )
        )

    async def repository(self, owner, name):
        return await self.get(f"/repos/{owner}/{name}")

    async def search_repositories(self, query, per_page=5):
        return await self.get("/search/repositories", data={"q": query, "per_page": per_page})


async def main():
    async with GitHubClient(os.getenv("GITHUB_TOKEN")) as client:
        envelope = await client.repository("psf", "requests")
        if envelope.has_error:
            print(f"✗ Request failed ({envelope.status_code}): {envelope.raw.error}")
            return

        print(f"✓ {envelope.content['full_name']}: {envelope.content['stargazers_count']} stars")

        results = await client.search_repositories("http client language:python")
        for repo in (results.content or {}).get("items", []):
            print(f"  - {repo['full_name']}")


if __name__ == "__main__":
    asyncio.run(main())
