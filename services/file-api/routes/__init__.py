from routes.csv_files import router as csv_router
from routes.files import router as files_router
from routes.json_files import router as json_router

__all__ = ["files_router", "csv_router", "json_router"]
