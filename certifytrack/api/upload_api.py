from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool

from certifytrack.auth.auth_handler import require_admin
from certifytrack.configs import storage

router = APIRouter(prefix="/uploads", tags=["uploads"], dependencies=[Depends(require_admin)])


@router.post("/image")
async def upload_image(file: UploadFile = File(...), folder: str = Form(...)):
    data = await file.read()
    url = await run_in_threadpool(
        storage.upload_image, data, file.filename or "upload", folder,
        file.content_type or "application/octet-stream",
    )
    return {"url": url}
