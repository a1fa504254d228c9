# routes.py
from fastapi import FastAPI
from controller.image_controller import image_router


def register_routes(app: FastAPI) -> None:
    """Register controllers here."""
    app.include_router(image_router)
