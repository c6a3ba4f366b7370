from pydantic import BaseModel


class UploadResponse(BaseModel):
    message: str
    filename: str
    size_bytes: int


class ErrorResponse(BaseModel):
    error: str


class StatusReport(BaseModel):
    status: str = "ok"
    version: str
    server_time: str
    hostname: str
