from sqlalchemy import update

from hometasks.core.constants import (
    AccountSuccesses,
    DefaultErrors,
    EmailErrors,
    FamilyErrors,
    UserErrors,
)
from hometasks.db.repositories import FamilyRepository
from hometasks.models import Family, User


def _heads(db, family_id):
    db.expire_all()
    return [u.id for u in db.query(User).filter_by(family_id=family_id, is_family_head=True)]


class TestCreateFamily:
    def test_creator_becomes_head(self, client, db, make_user, auth):
        user = make_user("founder@hometasks.io")
        res = client.post("/families", json={"name": "Doe"}, headers=auth(user))
        assert res.status_code == 200
        family_id = res.json()["family_id"]
        db.refresh(user)
        assert user.family_id == family_id
        assert user.is_family_head is True

    def test_requires_name(self, client, make_user, auth):
        user = make_user("founder@hometasks.io")
        res = client.post("/families", json={"name": ""}, headers=auth(user))
        assert res.status_code == 400
        assert res.json() == {"errors": {"name": DefaultErrors.IS_REQUIRED}}

    def test_rejects_user_with_family(self, client, household, auth):
        res = client.post("/families", json={"name": "Second"}, headers=auth(household.member))
        assert res.status_code == 400
        assert res.json() == {"errors": {"user": UserErrors.ALREADY_HAS_FAMILY}}

    def test_rejects_not_verified_user(self, client, not_verified_user, auth):
        res = client.post("/families", json={"name": "Doe"}, headers=auth(not_verified_user))
        assert res.json()["errors"]["user"] == UserErrors.HAS_NO_PERMISSIONS


class TestGetFamily:
    def test_lists_members(self, client, household, auth):
        res = client.get("/families/me", headers=auth(household.member))
        assert res.status_code == 200
        family = res.json()["family"]
        assert family["name"] == "Doe"
        assert [u["email"] for u in family["users"]] == ["head@hometasks.io", "member@hometasks.io"]
        assert [u["is_family_head"] for u in family["users"]] == [True, False]


class TestInvite:
    def test_head_invites_user(self, client, db, household, make_user, auth):
        newcomer = make_user("newcomer@hometasks.io")
        res = client.post("/families/invite", json={"email": "newcomer@hometasks.io"}, headers=auth(household.head))
        assert res.status_code == 200
        assert res.json() == {"account": AccountSuccesses.INVITED}
        db.refresh(newcomer)
        assert newcomer.family_id == household.family.id
        assert newcomer.is_family_head is False

    def test_member_cannot_invite(self, client, household, make_user, auth):
        make_user("newcomer@hometasks.io")
        res = client.post("/families/invite", json={"email": "newcomer@hometasks.io"}, headers=auth(household.member))
        assert res.status_code == 400
        assert res.json()["errors"]["user"] == UserErrors.HAS_NO_PERMISSIONS

    def test_unknown_email(self, client, household, auth):
        res = client.post("/families/invite", json={"email": "ghost@hometasks.io"}, headers=auth(household.head))
        assert res.status_code == 404

    def test_user_already_in_a_family(self, client, household, auth):
        res = client.post("/families/invite", json={"email": "member@hometasks.io"}, headers=auth(household.head))
        assert res.status_code == 409

    def test_requires_email(self, client, household, auth):
        res = client.post("/families/invite", json={}, headers=auth(household.head))
        assert res.json() == {"errors": {"email": EmailErrors.IS_REQUIRED}}


class TestAssignFamilyHead:
    def test_transfers_headship(self, client, db, household, auth):
        res = client.post(
            "/families/head", json={"user_to_assign_id": household.member.id}, headers=auth(household.head)
        )
        assert res.status_code == 200
        assert res.json() == {"account": AccountSuccesses.FAMILY_HEAD_ASSIGNED}
        assert _heads(db, household.family.id) == [household.member.id]

    def test_self_assignment(self, client, db, household, auth):
        res = client.post(
            "/families/head", json={"user_to_assign_id": household.head.id}, headers=auth(household.head)
        )
        assert res.status_code == 400
        assert res.json() == {"errors": {"email": EmailErrors.ASSIGN_ITSELF}}
        assert _heads(db, household.family.id) == [household.head.id]

    def test_missing_target(self, client, household, auth):
        res = client.post("/families/head", json={}, headers=auth(household.head))
        assert res.json() == {"errors": {"user_to_assign_id": DefaultErrors.IS_REQUIRED}}

    def test_non_head_cannot_assign(self, client, db, household, auth):
        res = client.post(
            "/families/head", json={"user_to_assign_id": household.head.id + 100}, headers=auth(household.member)
        )
        assert res.json() == {"errors": {"email": EmailErrors.IS_NO_FAMILY_HEAD}}

    def test_target_outside_family(self, client, db, household, make_user, auth):
        outsider = make_user("outsider@hometasks.io")
        res = client.post(
            "/families/head", json={"user_to_assign_id": outsider.id}, headers=auth(household.head)
        )
        assert res.status_code == 400
        assert res.json() == {"errors": {"family": FamilyErrors.NO_SUCH_USER}}
        db.refresh(outsider)
        assert outsider.is_family_head is False

    def test_head_alone_in_family_is_too_small(self, client, db, household, auth):
        solo = Family(name="Solo")
        db.add(solo)
        db.commit()
        household.head.family_id = solo.id
        db.commit()
        res = client.post(
            "/families/head", json={"user_to_assign_id": household.member.id}, headers=auth(household.head)
        )
        assert res.json() == {"errors": {"family": FamilyErrors.TOO_SMALL}}

    def test_headship_lost_before_lock_is_rejected(self, client, db, household, auth):
        db.refresh(household.head)
        headers = auth(household.head)
        # another transfer already took the headship; the session still holds the old flag
        db.execute(
            update(User)
            .where(User.id == household.head.id)
            .values(is_family_head=False)
            .execution_options(synchronize_session=False)
        )
        assert household.head.is_family_head is True
        res = client.post(
            "/families/head", json={"user_to_assign_id": household.member.id}, headers=headers
        )
        assert res.status_code == 400
        assert res.json() == {"errors": {"email": EmailErrors.IS_NO_FAMILY_HEAD}}
        assert household.member.id not in _heads(db, household.family.id)


class TestFamilyRepository:
    def test_transfer_head_leaves_exactly_one_head(self, db, household, make_user):
        third = make_user("third@hometasks.io", family=household.family)
        repo = FamilyRepository(db)
        repo.transfer_head(household.family.id, third.id)
        db.commit()
        assert _heads(db, household.family.id) == [third.id]

    def test_transfer_head_is_scoped_to_family(self, db, household, make_user):
        other = Family(name="Other")
        db.add(other)
        db.commit()
        other_head = make_user("other-head@hometasks.io", family=other, is_family_head=True)
        FamilyRepository(db).transfer_head(household.family.id, household.member.id)
        db.commit()
        assert _heads(db, other.id) == [other_head.id]
