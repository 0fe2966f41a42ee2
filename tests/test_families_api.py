"""
HTTP tests for family creation, listing and membership visibility.
"""
from conftest import create_family


class TestCreateFamily:
    def test_creator_becomes_active_admin(self, alice):
        family = create_family(alice, 'Smiths')

        members = alice.get(f"/api/families/{family['id']}/members").get_json()
        assert len(members) == 1
        assert members[0]['userId'] == alice.user['id']
        assert members[0]['role'] == 'admin'
        assert members[0]['status'] == 'active'
        assert members[0]['inviteEmail'] == 'a@x.com'

    def test_returns_family(self, alice):
        family = create_family(alice, 'Smiths')
        assert family['name'] == 'Smiths'
        assert family['createdBy'] == alice.user['id']

    def test_name_required(self, alice):
        response = alice.post('/api/families', json={'name': '   '})
        assert response.status_code == 400
        assert response.get_json() == {'error': 'name: Family name is required'}

    def test_name_must_be_a_string(self, alice):
        response = alice.post('/api/families', json={'name': 42})
        assert response.status_code == 400
        assert response.get_json()['error'].startswith('name: Not a valid string value')


class TestListFamilies:
    def test_lists_only_callers_families(self, alice, bob):
        create_family(alice, 'Smiths')
        create_family(alice, 'Joneses')
        create_family(bob, 'Browns')

        names = [f['name'] for f in alice.get('/api/families').get_json()]
        assert names == ['Smiths', 'Joneses']

        names = [f['name'] for f in bob.get('/api/families').get_json()]
        assert names == ['Browns']

    def test_empty_for_new_user(self, alice):
        assert alice.get('/api/families').get_json() == []


class TestListMembers:
    def test_non_member_is_forbidden(self, alice, bob, smiths):
        response = bob.get(f"/api/families/{smiths['id']}/members")
        assert response.status_code == 403
        assert 'error' in response.get_json()

    def test_pending_invites_listed_without_tokens(self, alice, smiths, mailer):
        alice.post(f"/api/families/{smiths['id']}/members", json={'inviteEmail': 'new@x.com'})

        members = alice.get(f"/api/families/{smiths['id']}/members").get_json()
        assert [m['status'] for m in members] == ['active', 'pending']
        assert all('inviteToken' not in m for m in members)
