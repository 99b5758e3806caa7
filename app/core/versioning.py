from __future__ import annotations

from fastapi import FastAPI
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.openapi.utils import get_openapi
from fastapi.routing import APIRoute


API_PREFIX = "/api"
SUPPORTED_VERSIONS: tuple[int, ...] = (1, 2)

SUPPORTED_VERSIONS_HEADER = "api-supported-versions"


def version_prefix(version: int) -> str:
    return f"{API_PREFIX}/v{version}"


def group_name(version: int) -> str:
    return f"v{version}"


def supported_versions_value() -> str:
    return ", ".join(str(v) for v in SUPPORTED_VERSIONS)


def version_routes(app: FastAPI, version: int) -> list[APIRoute]:
    prefix = version_prefix(version) + "/"
    return [r for r in app.routes if isinstance(r, APIRoute) and r.path.startswith(prefix)]


def build_version_openapi(app: FastAPI, version: int) -> dict:
    """
    OpenAPI document restricted to the routes of one API version.
    """
    return get_openapi(
        title=f"{app.title} v{version}",
        version=str(version),
        routes=version_routes(app, version),
    )


def register_version_docs(app: FastAPI) -> None:
    """
    Serve /swagger/v{n}/swagger.json per version and a Swagger UI listing them.
    """
    cache: dict[int, dict] = {}

    def _make_doc_endpoint(version: int):
        async def version_openapi() -> dict:
            if version not in cache:
                cache[version] = build_version_openapi(app, version)
            return cache[version]

        version_openapi.__name__ = f"openapi_{group_name(version)}"
        return version_openapi

    for version in SUPPORTED_VERSIONS:
        app.add_api_route(
            f"/swagger/{group_name(version)}/swagger.json",
            _make_doc_endpoint(version),
            methods=["GET"],
            include_in_schema=False,
        )

    # Newest first so the UI opens on the default version
    urls = [
        {"url": f"/swagger/{group_name(v)}/swagger.json", "name": group_name(v).upper()}
        for v in sorted(SUPPORTED_VERSIONS, reverse=True)
    ]

    async def swagger_ui():
        return get_swagger_ui_html(
            openapi_url=urls[0]["url"],
            title=f"{app.title} - Swagger UI",
            swagger_ui_parameters={"urls": urls},
        )

    app.add_api_route("/swagger", swagger_ui, methods=["GET"], include_in_schema=False)
