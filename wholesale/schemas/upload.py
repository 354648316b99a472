# wholesale/schemas/upload.py
from sqlmodel import SQLModel


class UploadResponse(SQLModel):
    url: str
