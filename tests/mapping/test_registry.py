import pytest

from examples.user_directory import User, UserMapper
from uowkit.errors import ConfigurationError, MapperConfigurationError
from uowkit.mapping import EntityMapper, MapperRegistry


class Admin(User):
    pass


class UserFamilyMapper(UserMapper):
    def handles(self, entity_type: type) -> bool:
        return issubclass(entity_type, User)


def test_resolves_single_matching_mapper():
    mapper = UserMapper()
    registry = MapperRegistry([mapper])

    assert registry.mapper_for(User) is mapper


def test_default_handles_requires_exact_type():
    registry = MapperRegistry([UserMapper()])

    with pytest.raises(MapperConfigurationError):
        registry.mapper_for(Admin)


def test_no_matching_mapper_is_configuration_error():
    registry = MapperRegistry()

    with pytest.raises(ConfigurationError, match="No mapper registered"):
        registry.mapper_for(User)


def test_ambiguous_mappers_are_configuration_error():
    registry = MapperRegistry([UserMapper(), UserFamilyMapper()])

    with pytest.raises(MapperConfigurationError, match="several mappers"):
        registry.mapper_for(User)


def test_custom_handles_covers_subclasses():
    family = UserFamilyMapper()
    registry = MapperRegistry([family])

    assert registry.mapper_for(Admin) is family


def test_register_invalidates_cached_resolution():
    registry = MapperRegistry([UserMapper()])
    registry.mapper_for(User)

    registry.register(UserFamilyMapper())

    assert len(registry) == 2
    with pytest.raises(MapperConfigurationError):
        registry.mapper_for(User)


def test_mapper_contract_is_abstract():
    with pytest.raises(TypeError):
        EntityMapper()
    assert repr(UserMapper()) == "UserMapper[User]"


class UntypedMapper(EntityMapper):
    def insert(self, transaction, entity):
        pass

    def update(self, transaction, entity):
        pass

    def delete(self, transaction, entity):
        pass

    def fetch(self, id, connection):
        return None


def test_mapper_without_entity_type_is_rejected():
    with pytest.raises(MapperConfigurationError, match="UntypedMapper"):
        MapperRegistry([UntypedMapper()])
    with pytest.raises(MapperConfigurationError):
        MapperRegistry().register(UntypedMapper())
    assert repr(UntypedMapper()) == "UntypedMapper[?]"
