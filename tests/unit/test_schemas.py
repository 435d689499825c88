"""Tests for request/response schema configuration."""

import inspect

import pytest
from pydantic import BaseModel

import app.schemas as schemas

SCHEMAS = [obj for obj in vars(schemas).values() if inspect.isclass(obj) and issubclass(obj, BaseModel)]


@pytest.mark.parametrize("schema", SCHEMAS, ids=lambda schema: schema.__name__)
def test_uses_model_config(schema):
    assert "Config" not in vars(schema)


def test_response_schemas_read_from_orm_objects():
    for schema in (schemas.UserResponse, schemas.PlanResponse, schemas.WorkoutResponse, schemas.ExerciseResponse):
        assert schema.model_config.get("from_attributes") is True


def test_request_schemas_strip_whitespace():
    assert schemas.ExerciseCreate(name="  Front squat ").name == "Front squat"
    assert schemas.ProfileUpdate(city=" Kazan ").city == "Kazan"
