# app/common/deps.py

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.services.greeting_service import GreetingService

# One service per request, built from the settings resolved for that request
def get_greeting_service(settings: Settings = Depends(get_settings)) -> GreetingService:
    return GreetingService(greeting=settings.greetingServiceGreeting)
