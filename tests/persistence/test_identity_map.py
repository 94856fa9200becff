from examples.user_directory import User
from uowkit.persistence import IdentityMap


def test_add_get_and_remove_by_identity():
    identity_map = IdentityMap()
    user = User("Ann")

    identity_map.add(user)

    assert identity_map.get(user.id) is user
    assert user in identity_map
    assert identity_map.has_id(user.id)

    identity_map.remove(user)
    assert identity_map.get(user.id) is None
    assert len(identity_map) == 0


def test_remove_uses_identity_not_instance():
    identity_map = IdentityMap()
    user = User("Ann")
    identity_map.add(user)

    identity_map.remove(User("Copy", id=user.id))

    assert user not in identity_map


def test_values_preserve_insertion_order():
    identity_map = IdentityMap()
    users = [User(name) for name in ("a", "b", "c")]
    for user in users:
        identity_map.add(user)

    assert identity_map.values() == users
    assert list(identity_map) == users

    identity_map.clear()
    assert identity_map.values() == []
