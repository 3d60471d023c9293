"""
Tests for payload validation
"""
from datetime import datetime

import pytest

from todo_api.exceptions import ValidationException
from todo_api.validation import (
    validate_credentials,
    validate_due_date,
    validate_tags,
    validate_task_list_payload,
    validate_task_payload,
)


class TestCredentials:

    def test_email_is_trimmed(self):
        assert validate_credentials({'email': ' a@b.c ', 'password': 'pw'}) == ('a@b.c', 'pw', None)

    @pytest.mark.parametrize('payload', [None, [], {}, {'email': 'a@b.c'}, {'email': '  ', 'password': 'x'}])
    def test_missing_fields(self, payload):
        with pytest.raises(ValidationException):
            validate_credentials(payload)


class TestTaskListPayload:

    def test_partial_only_returns_given_keys(self):
        assert validate_task_list_payload({'description': 'd'}, partial=True) == {'description': 'd'}

    def test_null_description_clears(self):
        assert validate_task_list_payload({'name': 'n', 'description': None}) == {'name': 'n', 'description': None}

    def test_color_pattern(self):
        assert validate_task_list_payload({'name': 'n', 'color': '#a1B2c3'})['color'] == '#a1B2c3'
        with pytest.raises(ValidationException, match='hex color'):
            validate_task_list_payload({'name': 'n', 'color': '#a1B2c'})


class TestTaskPayload:

    def test_create_maps_field_names(self):
        cleaned = validate_task_payload({
            'taskListId': 'list-1',
            'title': ' Title ',
            'dueDate': '2024-12-31',
        })
        assert cleaned == {
            'task_list_id': 'list-1',
            'title': 'Title',
            'due_date': datetime(2024, 12, 31),
        }

    def test_empty_priority_on_create_uses_default(self):
        assert 'priority' not in validate_task_payload({'taskListId': 'l', 'title': 't', 'priority': ''})

    def test_partial_ignores_task_list_id(self):
        assert validate_task_payload({'taskListId': 'other', 'completed': False}, partial=True) == {'completed': False}

    def test_partial_rejects_invalid_priority(self):
        with pytest.raises(ValidationException):
            validate_task_payload({'priority': None}, partial=True)


class TestFieldHelpers:

    def test_tags_are_trimmed_and_blanks_dropped(self):
        assert validate_tags([' a ', '', 'b']) == ['a', 'b']

    def test_ten_tags_allowed(self):
        assert len(validate_tags([f't{i}' for i in range(10)])) == 10

    def test_due_date_with_offset_is_converted_to_utc(self):
        assert validate_due_date('2024-12-31T01:00:00+02:00') == datetime(2024, 12, 30, 23, 0)

    def test_empty_due_date_clears(self):
        assert validate_due_date('') is None
        assert validate_due_date(None) is None
