# wholesale/routers/uploads.py
from fastapi import APIRouter, Depends, File, UploadFile, status

from wholesale.core.auth import require_auth
from wholesale.schemas.upload import UploadResponse
from wholesale.services.upload_service import UploadService

router = APIRouter(prefix="/uploads", tags=["Uploads"])

service = UploadService()


@router.post(
    "",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_auth)],
)
def upload_file(file: UploadFile = File(...)):
    """
    Upload a single file (multipart field `file`) and return its public URL.

    - Accepts JPEG, PNG, WEBP, GIF and PDF up to MAX_UPLOAD_BYTES.
    """
    file_bytes = file.file.read()
    url = service.upload(
        filename=file.filename,
        content_type=file.content_type,
        file_bytes=file_bytes,
    )
    return UploadResponse(url=url)
