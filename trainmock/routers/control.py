"""Control router the harness uses to tune delays and fault injection."""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException

from ..core.fault import always_fail, fail_on_paths
from ..models.enums import Operation
from ..models.schemas import DelayUpdateRequest, FaultUpdateRequest, PaymentInformation
from ..services.mock_service import MockEngine
from ..services.payment_service import InMemoryPaymentNotifier
from .deps import get_engine

router = APIRouter(prefix="/mock", tags=["control"])


@router.get("/delays", response_model=Dict[str, float])
async def get_delays(engine: MockEngine = Depends(get_engine)):
    """Current per-operation delays in seconds."""
    return engine.delays.as_dict()


@router.put("/delays/{operation}", response_model=Dict[str, float])
async def set_delay(
    operation: str,
    update: DelayUpdateRequest,
    engine: MockEngine = Depends(get_engine),
):
    """
    Set the delay of one operation.

    Applies to requests that arrive after the update.
    """
    try:
        op = Operation(operation)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown operation: {operation}")

    engine.delays.set(op, update.seconds)
    return engine.delays.as_dict()


@router.delete("/delays", response_model=Dict[str, float])
async def reset_delays(engine: MockEngine = Depends(get_engine)):
    engine.delays.reset()
    return engine.delays.as_dict()


@router.put("/fault")
async def set_fault(update: FaultUpdateRequest, engine: MockEngine = Depends(get_engine)):
    """
    Configure the fault injector.

    With ``fail`` set, matching requests to /initialize answer 500 until
    the injector is reconfigured.
    """
    if not update.fail:
        engine.inject(None)
    elif update.paths:
        engine.inject(fail_on_paths(*update.paths))
    else:
        engine.inject(always_fail)

    return {"fault_injected": engine.fault_injector.is_active}


@router.delete("/fault")
async def reset_fault(engine: MockEngine = Depends(get_engine)):
    engine.fault_injector.reset()
    return {"fault_injected": engine.fault_injector.is_active}


@router.get("/payments", response_model=List[PaymentInformation])
async def list_payments(engine: MockEngine = Depends(get_engine)):
    """Payments recorded by the in-memory notifier."""
    notifier = engine.payment_notifier
    if not isinstance(notifier, InMemoryPaymentNotifier):
        return []
    return notifier.payments


@router.delete("/payments")
async def clear_payments(engine: MockEngine = Depends(get_engine)):
    """Drop recorded payments between harness runs."""
    notifier = engine.payment_notifier
    if not isinstance(notifier, InMemoryPaymentNotifier):
        return {"cleared": 0}
    return {"cleared": await notifier.clear()}
