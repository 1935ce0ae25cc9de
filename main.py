import logging

from fastapi import FastAPI, responses
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

import handler as hlp
from api.v1.router import contact_router
from config.setting import API_PREFIX
from error import ServerError

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Contact API", version="1.0.0", description="Contact page form relay"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, hlp.validation_error_handler)
    app.add_exception_handler(RequestValidationError, hlp.validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, hlp.validation_http_exceptions_handler)
    app.add_exception_handler(ServerError, hlp.server_error_handler)

    app.include_router(contact_router, prefix=API_PREFIX)

    @app.get("/", include_in_schema=False)
    def redirect_to_docs():
        return responses.RedirectResponse("/docs")

    return app


app = create_app()
