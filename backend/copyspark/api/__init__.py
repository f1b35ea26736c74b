from copyspark.api.routes import router

__all__ = ["router"]
