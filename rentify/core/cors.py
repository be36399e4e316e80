from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rentify.core.request_logging import REQUEST_ID_HEADER
from rentify.core.settings import get_settings

ALLOWED_METHODS = ["GET", "POST", "PUT", "PATCH"]


def add_cors_middleware(app: FastAPI) -> None:
    settings = get_settings()
    origins = settings.cors_origins_list

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentialed requests against a wildcard origin.
        allow_credentials="*" not in origins,
        allow_methods=ALLOWED_METHODS,
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
