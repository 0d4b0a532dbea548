from fastapi import APIRouter, Depends, status
from fastapi.responses import FileResponse

from employee_api.core.config import Settings, get_settings
from employee_api.core.errors import ApiError

router = APIRouter(tags=["frontend"])

INDEX_FILE = "index.html"


@router.get("/", include_in_schema=False)
def index(settings: Settings = Depends(get_settings)):
    """Serve the entry file of the pre-built front-end bundle."""
    index_path = settings.FRONTEND_DIR / INDEX_FILE
    if not index_path.is_file():
        raise ApiError(status.HTTP_404_NOT_FOUND, "Front-end bundle not found")
    return FileResponse(index_path)
