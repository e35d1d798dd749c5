"""Bill Signing Web Server - HTTP binding of the MCP facade.

Exposes, under a configurable base path (default ``/api/mcp``):
- GET  /tools               tool catalog
- POST /call                tool invocation ``{name, arguments}``
- GET  /resources           resource descriptors
- GET  /resources/{uri}     resource contents (percent-encoded URI)

and ``GET /health`` at the root. Tool results use the same envelope as the
stdio binding; the error category picks the HTTP status (400/404/500).
Unknown resource URIs answer 404, where the stdio binding answers with
empty contents.
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from urllib.parse import unquote

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import normalize_base_path
from app.logger import Logger
from app.mcp_server.components import ServerComponents
from app.mcp_server.responses import envelope_to_dict
from app.mcp_server.routing import ToolDispatcher

SERVICE_NAME = "bill-signing-mcp"
INVALID_RESOURCE_URI_MESSAGE = "URI do recurso inválida"
RESOURCE_READ_FAILED_MESSAGE = "Erro ao ler recurso"

# A "%" not followed by two hex digits
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class BillSigningWebServer:
    """FastAPI server exposing the tool catalog, tool calls and resources."""

    def __init__(
        self,
        components: ServerComponents,
        base_path: Optional[str] = None,
        cors_origin: Optional[str] = None,
    ):
        """
        Initialize the web server.

        Args:
            components: Shared server components (dispatcher, resource reader)
            base_path: Mount point of the MCP routes (default: settings value)
            cors_origin: Allowed frontend origin (default: settings value)
        """
        self.components = components
        self.logger: Logger = components.logger
        settings = components.settings
        self.base_path = (
            settings.mcp_base_path if base_path is None else normalize_base_path(base_path)
        )
        self.cors_origin = cors_origin or settings.cors_origin

        self.app = FastAPI(
            title="bill-signing-mcp",
            description="MCP tools and resources for the document signing service",
        )
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=[self.cors_origin],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._setup_routes()
        self.logger.info(
            "Web server initialized",
            base_path=self.base_path or "/",
            cors_origin=self.cors_origin,
        )

    def _resource_uri(self, request: Request, fallback: str) -> str:
        """
        Decode the resource URI from the raw request path.

        The raw segment is decoded once, as strict UTF-8, so encoded
        separators such as ``%3A%2F%2F`` come back as ``://``.

        Raises:
            ValueError: If the segment has a malformed escape or is not valid
                percent-encoded UTF-8
        """
        raw_path = request.scope.get("raw_path")
        marker = f"{self.base_path}/resources/".encode("ascii")
        if isinstance(raw_path, bytes) and raw_path.startswith(marker):
            segment = raw_path[len(marker):].decode("ascii", errors="strict")
            if _MALFORMED_ESCAPE.search(segment):
                raise ValueError(f"Malformed percent-encoding in {segment!r}")
            return unquote(segment, encoding="utf-8", errors="strict")
        return fallback

    def _setup_routes(self):
        router = APIRouter(prefix=self.base_path)
        components = self.components

        @self.app.get("/health")
        async def health():
            """Liveness probe."""
            return JSONResponse(
                content={
                    "status": "ok",
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "service": SERVICE_NAME,
                }
            )

        @router.get("/tools")
        async def list_tools():
            self.logger.info("GET /tools")
            tools = [
                tool.descriptor().model_dump(mode="json", by_alias=True)
                for tool in components.dispatcher.list_tools()
            ]
            return JSONResponse(content={"tools": tools})

        @router.post("/call")
        async def call_tool(request: Request):
            try:
                body: Any = await request.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}

            name = body.get("name")
            self.logger.info("POST /call", tool=name)
            if not isinstance(name, str) or not name:
                result = ToolDispatcher.missing_name()
            else:
                arguments = body.get("arguments")
                result = await components.dispatcher.call_tool(
                    name, arguments if isinstance(arguments, dict) else {}
                )

            self.logger.info("/call completed", tool=name, status=result.http_status)
            return JSONResponse(
                status_code=result.http_status, content=envelope_to_dict(result.envelope)
            )

        @router.get("/resources")
        async def list_resources():
            self.logger.info("GET /resources")
            resources = [
                descriptor.model_dump(mode="json")
                for descriptor in components.resource_reader.list_resources()
            ]
            return JSONResponse(content={"resources": resources})

        @router.get("/resources/{uri:path}")
        async def read_resource(uri: str, request: Request):
            try:
                resource_uri = self._resource_uri(request, uri)
            except ValueError as e:
                self.logger.warning("Undecodable resource URI", error=str(e), status=400)
                return JSONResponse(
                    status_code=400,
                    content={"contents": [], "error": INVALID_RESOURCE_URI_MESSAGE},
                )

            self.logger.info("GET /resources/{uri}", uri=resource_uri)
            try:
                contents = components.resource_reader.read_resource(resource_uri)
            except Exception as e:
                self.logger.error(
                    "Resource read failed",
                    uri=resource_uri,
                    error=str(e),
                    error_type=type(e).__name__,
                    status=500,
                )
                return JSONResponse(
                    status_code=500,
                    content={"contents": [], "error": RESOURCE_READ_FAILED_MESSAGE},
                )

            if contents is None:
                return JSONResponse(status_code=404, content={"contents": []})
            body: Dict[str, Any] = {"contents": [contents.model_dump(mode="json")]}
            return JSONResponse(content=body)

        self.app.include_router(router)
