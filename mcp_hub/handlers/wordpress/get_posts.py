# mcp_hub/handlers/wordpress/get_posts.py

import re
from typing import Any, Dict, Optional, Union

import httpx
from pydantic import BaseModel, Field, field_validator

from mcp_hub.connectors.factory import register_handler
from mcp_hub.handlers.connector_handler import ActionHandler, success_response
from mcp_hub.stores.memory_store import InMemoryStore

_ID_LIST = re.compile(r"^\d+(,\d+)*$")


def _check_id_list(value):
    if value is None:
        return value
    if isinstance(value, int):
        if value <= 0:
            raise ValueError("Must be a positive integer.")
        return value
    if not _ID_LIST.match(value):
        raise ValueError("Must be a positive integer or a comma-separated string of positive integers.")
    return value


class GetPostsArgs(BaseModel):
    search: Optional[str] = Field(None, description="Limit results to those matching a search term.")
    categories: Optional[Union[int, str]] = Field(None, description="Category ID or comma-separated IDs.")
    tags: Optional[Union[int, str]] = Field(None, description="Tag ID or comma-separated IDs.")

    @field_validator("categories", "tags")
    @classmethod
    def _check_ids(cls, value):
        return _check_id_list(value)


class WordPressAuth(BaseModel):
    baseUrl: str = Field(..., description="Site URL, e.g. https://blog.example.com")
    token: Optional[str] = Field(None, description="Application password or bearer token for non-public posts.")

    @field_validator("baseUrl")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("WordPress base URL is required.")
        return value.rstrip("/")


@register_handler("wordpress", "getPosts")
class WordPressGetPostsHandler(ActionHandler):
    """
    Handler para wordpress.getPosts.
    Usa GET {baseUrl}/wp-json/wp/v2/posts; el token es opcional para posts públicos.
    """

    description = (
        "Fetches posts from WordPress. Supports filtering by search term, category IDs, or tag IDs. "
        "Authentication is optional for public posts."
    )
    args_schema = GetPostsArgs
    connection_schema = WordPressAuth
    service_name = "WordPress"

    async def run(
        self,
        args: GetPostsArgs,
        auth: WordPressAuth,
        store: Optional[InMemoryStore] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if args.search:
            params["search"] = args.search
        if args.categories:
            params["categories"] = str(args.categories)
        if args.tags:
            params["tags"] = str(args.tags)

        headers = {"Content-Type": "application/json"}
        if auth.token:
            headers["Authorization"] = f"Bearer {auth.token}"

        posts = await self.request_json(
            "GET",
            f"{auth.baseUrl}/wp-json/wp/v2/posts",
            params=params,
            headers=headers,
        )
        posts = posts if isinstance(posts, list) else []

        return success_response({"posts": posts}, f"Retrieved {len(posts)} post(s).")

    def describe_http_error(self, error: httpx.HTTPStatusError) -> str:
        # 401 sin token: probablemente el recurso no es público
        if error.response.status_code == 401 and "Authorization" not in error.request.headers:
            return "WordPress API Error: This resource may require authentication."
        return super().describe_http_error(error)
