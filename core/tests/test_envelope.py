"""
Core — Envelope Tests

Tests for the error handler and success renderer envelopes.

@file core/tests/test_envelope.py
"""

import json

import pytest
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework.exceptions import NotAuthenticated, PermissionDenied, ValidationError
from rest_framework.response import Response

from core.exceptions import (
    ConflictError,
    DuplicateResourceError,
    InvalidStateTransition,
    ResourceNotFoundError,
    standard_exception_handler,
)
from core.renderers import StandardJSONRenderer


class TestExceptionHandler:
    def test_conflict_is_400(self):
        resp = standard_exception_handler(ConflictError(detail='Batch exists.'), {})
        assert resp.status_code == 400
        assert resp.data['success'] is False
        assert resp.data['message'] == 'Batch exists.'
        assert resp.data['code'] == 'CONFLICT'

    def test_conflict_subclasses_keep_their_code(self):
        assert issubclass(InvalidStateTransition, ConflictError)
        assert issubclass(DuplicateResourceError, ConflictError)
        resp = standard_exception_handler(InvalidStateTransition(), {})
        assert resp.status_code == 400
        assert resp.data['code'] == 'INVALID_STATE_TRANSITION'

    def test_http404_mapped_to_not_found(self):
        resp = standard_exception_handler(Http404(), {})
        assert resp.status_code == 404
        assert resp.data['code'] == ResourceNotFoundError.default_code

    def test_not_authenticated_is_401(self):
        resp = standard_exception_handler(NotAuthenticated(), {})
        assert resp.status_code == 401
        assert resp.data['success'] is False

    def test_permission_denied_is_403(self):
        resp = standard_exception_handler(PermissionDenied(), {})
        assert resp.status_code == 403

    def test_serializer_validation_message_names_field(self):
        resp = standard_exception_handler(ValidationError({'name': ['This field is required.']}), {})
        assert resp.status_code == 400
        assert resp.data['message'] == 'name: This field is required.'
        assert resp.data['errors'] == {'name': ['This field is required.']}

    def test_django_validation_error(self):
        resp = standard_exception_handler(DjangoValidationError({'code': ['Bad code.']}), {})
        assert resp.status_code == 400
        assert resp.data['code'] == 'VALIDATION_ERROR'

    def test_unhandled_exception_is_500(self):
        resp = standard_exception_handler(RuntimeError('boom'), {})
        assert resp.status_code == 500
        assert resp.data['code'] == 'INTERNAL_ERROR'
        assert 'boom' not in resp.data['message']


class TestStandardJSONRenderer:
    def _render(self, data, status_code=200):
        response = Response(data, status=status_code)
        body = StandardJSONRenderer().render(data, renderer_context={'response': response})
        return json.loads(body)

    def test_plain_payload_wrapped(self):
        assert self._render({'id': 1}) == {'success': True, 'data': {'id': 1}}

    def test_paginated_payload_maps_total(self):
        out = self._render({'count': 12, 'next': None, 'previous': None, 'results': [1, 2]})
        assert out == {'success': True, 'data': [1, 2], 'total': 12}

    def test_existing_envelope_untouched(self):
        payload = {'success': True, 'message': 'Deleted.'}
        assert self._render(payload) == payload

    @pytest.mark.parametrize('status_code', [400, 404, 500])
    def test_errors_pass_through(self, status_code):
        payload = {'success': False, 'message': 'x', 'errors': {}, 'code': 'X'}
        assert self._render(payload, status_code) == payload
