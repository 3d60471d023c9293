"""
Tests for task list endpoints
"""
import pytest


class TestTaskListCrud:

    def test_create_and_fetch(self, client, alice):
        response = client.post('/api/task-lists', json={
            'name': '  Work  ',
            'description': 'Office things',
            'color': '#1A2b3C',
        }, headers=alice['headers'])
        body = response.get_json()

        assert response.status_code == 201
        assert body['message'] == 'Task list created successfully'
        created = body['data']
        assert created['name'] == 'Work'
        assert created['userId'] == alice['user']['id']
        assert created['color'] == '#1A2b3C'
        assert created['createdAt'].endswith('Z')

        fetched = client.get(f"/api/task-lists/{created['id']}", headers=alice['headers']).get_json()
        assert fetched == {'success': True, 'data': created}

    def test_list_returns_count_and_only_own_lists(self, client, alice, bob, make_list):
        make_list(alice['headers'], 'One')
        make_list(alice['headers'], 'Two')
        make_list(bob['headers'], 'Bobs')

        body = client.get('/api/task-lists', headers=alice['headers']).get_json()
        assert body['success'] is True
        assert body['count'] == 2
        assert sorted(item['name'] for item in body['data']) == ['One', 'Two']

    def test_update(self, client, alice, make_list):
        task_list = make_list(alice['headers'], 'Old', description='keep me', color='#000000')
        response = client.put(
            f"/api/task-lists/{task_list['id']}",
            json={'name': 'New', 'color': None},
            headers=alice['headers'],
        )
        body = response.get_json()

        assert response.status_code == 200
        assert body['message'] == 'Task list updated successfully'
        assert body['data']['name'] == 'New'
        assert body['data']['description'] == 'keep me'
        assert body['data']['color'] is None

    def test_update_cannot_change_owner(self, client, alice, bob, make_list):
        task_list = make_list(alice['headers'])
        client.put(
            f"/api/task-lists/{task_list['id']}",
            json={'userId': bob['user']['id']},
            headers=alice['headers'],
        )
        fetched = client.get(f"/api/task-lists/{task_list['id']}", headers=alice['headers']).get_json()
        assert fetched['data']['userId'] == alice['user']['id']

    def test_delete_cascades_to_tasks(self, client, alice, make_list, make_task):
        task_list = make_list(alice['headers'])
        tasks = [make_task(alice['headers'], task_list['id'], f'Task {i}') for i in range(3)]

        response = client.delete(f"/api/task-lists/{task_list['id']}", headers=alice['headers'])
        assert response.status_code == 200
        assert response.get_json() == {'success': True, 'message': 'Task list deleted successfully'}

        assert client.get(f"/api/task-lists/{task_list['id']}", headers=alice['headers']).status_code == 404
        for task in tasks:
            assert client.get(f"/api/tasks/{task['id']}", headers=alice['headers']).status_code == 404


class TestTaskListValidation:

    def test_name_required(self, client, alice):
        response = client.post('/api/task-lists', json={'description': 'x'}, headers=alice['headers'])
        assert response.status_code == 400
        assert response.get_json() == {'success': False, 'error': 'Task list name is required'}

    def test_blank_name_rejected_on_update(self, client, alice, make_list):
        task_list = make_list(alice['headers'])
        response = client.put(f"/api/task-lists/{task_list['id']}", json={'name': '   '}, headers=alice['headers'])
        assert response.status_code == 400

    @pytest.mark.parametrize('payload', [
        {'name': 'x' * 101},
        {'name': 'ok', 'description': 'x' * 501},
        {'name': 'ok', 'color': 'red'},
        {'name': 'ok', 'color': '#12345'},
        {'name': 'ok', 'color': '#GGGGGG'},
    ])
    def test_field_rules(self, client, alice, payload):
        response = client.post('/api/task-lists', json=payload, headers=alice['headers'])
        assert response.status_code == 400
        assert response.get_json()['success'] is False


class TestTaskListIsolation:
    """Another user's list is indistinguishable from a missing one"""

    @pytest.mark.parametrize('method, json_body', [
        ('get', None),
        ('put', {'name': 'Hijacked'}),
        ('delete', None),
    ])
    def test_cross_user_access_is_404(self, client, alice, bob, make_list, method, json_body):
        task_list = make_list(alice['headers'])

        foreign = getattr(client, method)(f"/api/task-lists/{task_list['id']}", json=json_body, headers=bob['headers'])
        missing = getattr(client, method)('/api/task-lists/does-not-exist', json=json_body, headers=bob['headers'])

        assert foreign.status_code == missing.status_code == 404
        assert foreign.get_json() == missing.get_json() == {'success': False, 'error': 'Task list not found'}

        still_there = client.get(f"/api/task-lists/{task_list['id']}", headers=alice['headers']).get_json()
        assert still_there['data']['name'] == 'Work'
