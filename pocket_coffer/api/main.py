"""
HTTP binding of the command surface.
The host shell posts ``/invoke/{command}`` with a JSON payload and receives
either ``{"result": ...}`` or an error ``detail`` string.
"""

from typing import Any, Dict, Optional

from fastapi import Body, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from .commands import CommandError, Commands
from .schemas import CommandListResponse, HealthResponse, InvokeResponse
from ..core.config import VERSION, debug_enabled
from ..core.dao import Store
from ..util.logging import logger

HOST_ORIGINS = [
    "tauri://localhost",
    "http://tauri.localhost",
    "http://localhost:1420",
    "http://127.0.0.1:1420",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def get_commands(request: Request) -> Commands:
    return request.app.state.commands


def create_app(store: Store) -> FastAPI:
    """Build the API around an already-open Store."""
    app = FastAPI(
        title="Pocket Coffer Vault API",
        version=VERSION,
        description="Local vault store for passwords, calendar events, documents and settings",
        docs_url="/docs" if debug_enabled() else None,
        redoc_url="/redoc" if debug_enabled() else None
    )

    # Add CORS middleware so the desktop webview can call in
    app.add_middleware(
        CORSMiddleware,
        allow_origins=HOST_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.commands = Commands(store)

    @app.get("/health", response_model=HealthResponse)
    def health_check_endpoint(commands: Commands = Depends(get_commands)):
        """Check store health."""
        return HealthResponse(**commands.health())

    @app.get("/commands", response_model=CommandListResponse)
    def list_commands_endpoint(commands: Commands = Depends(get_commands)):
        return CommandListResponse(commands=commands.names)

    @app.post("/invoke/{command}", response_model=InvokeResponse)
    def invoke_endpoint(
        command: str,
        payload: Optional[Dict[str, Any]] = Body(default=None),
        commands: Commands = Depends(get_commands),
    ):
        """Invoke a named command."""
        if not commands.has(command):
            raise HTTPException(status_code=404, detail=f"unknown command: {command}")
        try:
            result = commands.invoke(command, payload)
        except CommandError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return InvokeResponse(result=result)

    logger.info(f"Vault API ready (store: {store.db_path})")
    return app
