from fastapi import APIRouter


def create_systems_router(container_env: dict):
    """Create systems router with access to container environment config."""
    router = APIRouter(prefix="/systems", tags=["System"])

    @router.get("/health")
    def health():
        return {"status": "ok"}

    @router.get("/config")
    def get_config():
        """Return current environment configuration values (the database URL is masked)."""
        return {
            "environment": {
                key: _display(key, value)
                for key, value in container_env.items()
            }
        }

    return router


def _display(key: str, value):
    if value is None:
        return None
    if key == "DATABASE_URL":
        return value.split("://", 1)[0] + "://***"
    return str(value)
