import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from eventdesk.api.deps import get_registration_service
from eventdesk.core.exceptions import ProcessingError, RegistrationError
from eventdesk.schemas import ErrorResponse, RegistrationRequest, RegistrationResponse
from eventdesk.services.registration import RegistrationService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/events/register",
    response_model=RegistrationResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def register_for_event(
    payload: RegistrationRequest,
    service: RegistrationService = Depends(get_registration_service),
):
    """
    Register an attendee for a company's event.
    """
    start_time = time.time()

    try:
        confirmation = service.register(payload)
    except ProcessingError as pe:
        return JSONResponse(status_code=pe.status_code, content={"error": pe.message})
    except RegistrationError as rej:
        logger.warning(f"Registration rejected ({rej.status_code}): {rej.message}")
        return JSONResponse(status_code=rej.status_code, content={"error": rej.message})
    except Exception as e:
        logger.error(f"Error registering for event: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to register for event"})

    processing_time = time.time() - start_time
    logger.info(f"Registration for {confirmation.eventName} handled in {processing_time:.2f}s")

    return RegistrationResponse(registration=confirmation)
