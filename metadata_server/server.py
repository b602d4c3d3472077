from __future__ import annotations

import argparse
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, Path, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from common.logging_setup import get_logger, setup_logging
from metadata_server.assets import ImageAsset, load_image_asset
from metadata_server.config import Settings, load_settings
from metadata_server.leader import leader_metadata

log = get_logger(__name__)

# ASCII decimal with optional leading "+"; no "-", spaces, "_" or fractions
INDEX_PATTERN = r"^\+?[0-9]+$"


def create_app(settings: Optional[Settings] = None, asset: Optional[ImageAsset] = None) -> FastAPI:
    """
    Build the FastAPI app. The image is loaded here, so a missing or broken
    asset stops startup with AssetError.
    """
    settings = settings or load_settings()
    asset = asset or load_image_asset(settings.asset_path)

    app = FastAPI(title="Marinade Leader Metadata", version="0.1.0")
    app.state.settings = settings
    app.state.asset = asset

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins,
        allow_methods=settings.allow_methods,
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        log.info("rejected %s", request.url.path, extra={"extra": {"errors": len(exc.errors())}})
        return JSONResponse(
            {"error": "invalid_index", "detail": jsonable_encoder(exc.errors())},
            status_code=400,
        )

    @app.get("/ml/{index}")
    def metadata(index: str = Path(..., pattern=INDEX_PATTERN)):
        try:
            n = int(index)
        except ValueError:
            # past int max_str_digits
            raise RequestValidationError(
                [{"type": "int_parsing", "loc": ("path", "index"), "msg": "index too long", "input": index}]
            ) from None
        log.debug("metadata for leader %d", n)
        return JSONResponse(leader_metadata(n).to_dict())

    @app.get("/leader.jpeg")
    def image():
        return Response(content=asset.data, media_type=asset.media_type)

    @app.get("/health")
    def health():
        return {"status": "ok", "asset": asset.describe()}

    return app


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Serve Marinade Leader NFT metadata and image")
    ap.add_argument("--config", default=None, help="YAML config (default: $METADATA_CONFIG or config/server.yaml)")
    ap.add_argument("--host", default=None, help="bind host (overrides config/env)")
    ap.add_argument("--port", type=int, default=None, help="bind port (overrides config/env)")
    ap.add_argument("--log-level", default=None, help="DEBUG/INFO/WARN/ERROR")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    settings = load_settings(args.config)
    if args.host:
        settings.host = args.host
    if args.port is not None:
        settings.port = args.port
    if args.log_level:
        settings.log_level = args.log_level.upper()
    setup_logging(settings.log_level, force=True)

    app = create_app(settings)
    log.info("listening on %s", settings.bind)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


# -------- local dev entrypoint --------
if __name__ == "__main__":
    main()
