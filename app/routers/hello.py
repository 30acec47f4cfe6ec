from fastapi import APIRouter, Depends

from app.common.deps import get_greeting_service
from app.common.metrics import TimerMetadata, metrics
from app.models.greeting import Greeting
from app.services.greeting_service import GreetingService

router = APIRouter(prefix="/hello", tags=["hello"])

SAY_HELLO_TIMER = TimerMetadata(
    name="sayHelloTime",
    display_name="Call duration",
    description="Time spent in call",
)

@router.get("/{name}", response_model=Greeting)
async def say_hello(name: str, service: GreetingService = Depends(get_greeting_service)):
    with metrics.time(SAY_HELLO_TIMER):
        return service.say_hello(name)
