# app/services/greeting_service.py

import logging

from app.models.greeting import Greeting

logger = logging.getLogger(__name__)

class GreetingService:

    def __init__(self, greeting: str):
        self.greeting = greeting

    def say_hello(self, name: str) -> Greeting:
        logger.debug("Greeting %s with %r", name, self.greeting)
        return Greeting(greeting=self.greeting, name=name)
