# pos/api/__init__.py
from fastapi import FastAPI
from pos.api.routers import health, products, customers, sales


def create_app() -> FastAPI:
    app = FastAPI(
        title="POS Store Service",
        version="1.0.0",
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(customers.router)
    app.include_router(sales.router)

    return app
