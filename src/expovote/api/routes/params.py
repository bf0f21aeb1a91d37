"""Shared request parameter types."""

from typing import Annotated

from fastapi import Form, Path

# Largest value a 32-bit INTEGER/SERIAL key can hold
MAX_PROJECT_ID = 2**31 - 1

ProjectIdPath = Annotated[int, Path(ge=1, le=MAX_PROJECT_ID, description="Project id")]
ProjectIdForm = Annotated[int, Form(ge=1, le=MAX_PROJECT_ID, description="Project id")]
