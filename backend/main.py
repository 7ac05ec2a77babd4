from typing import Any, Dict, Optional

from fastapi import Body, Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import check_engine_config_on_startup, logger
from exceptions import InvalidInputError, NotConfiguredError
from services import VerificationService, create_verification_service

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_service: Optional[VerificationService] = None


def get_verification_service() -> VerificationService:
    global _service
    if _service is None:
        _service = create_verification_service()
    return _service


@app.on_event("startup")
async def startup_event():
    check_engine_config_on_startup()


@app.get("/")
async def health_check():
    return {"status": "ok", "message": "Trust verification API is running."}


@app.get("/verify/status")
async def verify_status(service: VerificationService = Depends(get_verification_service)):
    return service.get_status()


@app.post("/verify")
async def verify(
    payload: Dict[str, Any] = Body(...),
    service: VerificationService = Depends(get_verification_service),
):
    """Verify a piece of social media content and return the validated verdict record."""
    try:
        result = await service.verify(payload)
    except NotConfiguredError as e:
        logger.error("Verification requested but engine is not configured.")
        raise HTTPException(status_code=503, detail=e.message)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return result.to_dict()
