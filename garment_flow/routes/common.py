"""Shared request handling for the list/create/get/update/delete endpoints."""
from flask import request
from marshmallow import ValidationError

from garment_flow.utils.responses import json_response, empty_response, error_response, validation_error


def list_records(repo, schema):
    return json_response(schema.dump(repo.list(), many=True))


def create_record(repo, schema):
    try:
        data = schema.load(request.get_json())
    except ValidationError as e:
        return validation_error(e.messages)
    record = repo.create(data)
    return json_response(schema.dump(record), 201)


def get_record(repo, schema, id):
    record = repo.get_by_id(id)
    if record is None:
        return error_response(f'{repo.label.capitalize()} not found', 404)
    return json_response(schema.dump(record))


def update_record(repo, schema, id):
    try:
        data = schema.load(request.get_json(), partial=True)
    except ValidationError as e:
        return validation_error(e.messages)
    record = repo.update(id, data)
    return json_response(schema.dump(record))


def delete_record(repo, id):
    repo.delete(id)
    return empty_response()
