"""Tests for add dust use case."""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from application.user.dto.inputs import AddDustUserInput
from application.user.dto.user_output import UserOutput
from application.user.use_cases.add_dust_user import AddDustUserUseCase
from domain.shared.errors import (
    EntityValidationError,
    FieldError,
    InputValidationError,
    NotFoundError,
)
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from fakes.user_fake_builder import UserFakeBuilder


@pytest.fixture
def use_case(repository):
    """Create add dust use case."""
    return AddDustUserUseCase(repository)


@pytest.mark.asyncio
async def test_add_dust_success(use_case, repository):
    """Test dust is added, persisted and returned."""
    user = User.create("John Doe")
    await repository.insert(user)

    output = await use_case.execute({"id": str(user.user_id), "dust": 50})

    assert isinstance(output, UserOutput)
    assert output.id == str(user.user_id)
    assert output.name == "John Doe"
    assert output.dust_balance == 50
    assert output.is_active is True
    assert output.created_at == user.created_at

    stored = await repository.find_by_id(user.user_id)
    assert stored.dust_balance == 50


@pytest.mark.asyncio
async def test_add_dust_accepts_input_model(use_case, repository):
    """Test execute() with an already validated input model."""
    user = UserFakeBuilder.a_user().with_dust_balance(10).build()
    await repository.insert(user)

    output = await use_case.execute(AddDustUserInput(id=str(user.user_id), dust=2.5))

    assert output.dust_balance == 12.5


@pytest.mark.asyncio
async def test_add_dust_unknown_user_raises_not_found(use_case):
    """Test that an id not present in the repository raises NotFoundError."""
    missing_id = str(uuid.uuid4())

    with pytest.raises(NotFoundError) as exc_info:
        await use_case.execute({"id": missing_id, "dust": 50})

    assert exc_info.value.identifier == missing_id
    assert exc_info.value.entity_kind == "User"


@pytest.mark.asyncio
async def test_add_dust_invalid_input_lists_all_fields(use_case):
    """Test that every malformed field is reported together."""
    with pytest.raises(InputValidationError) as exc_info:
        await use_case.execute({"id": "not-a-uuid", "dust": "fifty"})

    assert exc_info.value.fields == ["id", "dust"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload,field",
    [
        ({"dust": 5}, "id"),
        ({"id": str(uuid.uuid4())}, "dust"),
        ({"id": 123, "dust": 5}, "id"),
        ({"id": str(uuid.uuid4()), "dust": True}, "dust"),
        ({"id": str(uuid.uuid4()), "dust": float("nan")}, "dust"),
    ],
)
async def test_add_dust_malformed_field(use_case, payload, field):
    with pytest.raises(InputValidationError) as exc_info:
        await use_case.execute(payload)

    assert exc_info.value.fields == [field]


@pytest.mark.asyncio
async def test_add_dust_over_limit_does_not_persist(use_case, repository):
    """Test that a rejected balance leaves stored state untouched."""
    user = User.create("John Doe", dust_balance=50)
    await repository.insert(user)

    with pytest.raises(EntityValidationError):
        await use_case.execute({"id": str(user.user_id), "dust": 9999})

    stored = await repository.find_by_id(user.user_id)
    assert stored.dust_balance == 50


@pytest.mark.asyncio
async def test_add_dust_update_called_once_after_mutation():
    """Test repository interaction order with a mocked port."""
    user = User.create("John Doe")
    repository = MagicMock(spec=IUserRepository)
    repository.find_by_id = AsyncMock(return_value=user)
    repository.update = AsyncMock()

    await AddDustUserUseCase(repository).execute({"id": str(user.user_id), "dust": 5})

    repository.find_by_id.assert_awaited_once_with(user.user_id)
    repository.update.assert_awaited_once_with(user)
    assert repository.update.await_args.args[0].dust_balance == 5


@pytest.mark.asyncio
async def test_add_dust_notification_errors_raise_entity_validation_error():
    """Test the post-mutation notification check."""
    user = MagicMock(spec=User)
    user.notification = MagicMock()
    user.notification.has_errors.return_value = True
    user.notification.to_list.return_value = [FieldError("dust_balance", "broken")]
    repository = MagicMock(spec=IUserRepository)
    repository.find_by_id = AsyncMock(return_value=user)
    repository.update = AsyncMock()

    with pytest.raises(EntityValidationError) as exc_info:
        await AddDustUserUseCase(repository).execute({"id": str(uuid.uuid4()), "dust": 5})

    assert exc_info.value.errors == [FieldError("dust_balance", "broken")]
    repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_add_dust_attaches_validation_hook(repository, validation_hook):
    user = User.create("John Doe")
    await repository.insert(user)

    await AddDustUserUseCase(repository, validation_hook=validation_hook).execute(
        {"id": str(user.user_id), "dust": 1}
    )

    assert len(validation_hook.calls) == 1
    assert validation_hook.calls[0][1]["dust_balance"] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "balance,dust,expected",
    [(0.1, 0.2, 0.3), (1.1, 2.2, 3.3), (9998.9999, 0.0001, 9999)],
)
async def test_add_dust_fractional_amounts_sum_exactly(
    use_case, repository, balance, dust, expected
):
    """Test that fractional amounts do not pick up float rounding noise."""
    user = User.create("John Doe", dust_balance=balance)
    await repository.insert(user)

    output = await use_case.execute({"id": str(user.user_id), "dust": dust})

    assert output.dust_balance == expected
    assert (await repository.find_by_id(user.user_id)).dust_balance == expected


@pytest.mark.asyncio
async def test_add_dust_negative_amount_decreases_balance(use_case, repository):
    """Test that a negative amount is applied as a decrease."""
    user = User.create("John Doe", dust_balance=50)
    await repository.insert(user)

    output = await use_case.execute({"id": str(user.user_id), "dust": -10})

    assert output.dust_balance == 40
    assert (await repository.find_by_id(user.user_id)).dust_balance == 40


@pytest.mark.asyncio
async def test_add_dust_negative_amount_below_zero_does_not_persist(use_case, repository):
    """Test that a negative amount overdrawing the balance is rejected."""
    user = User.create("John Doe", dust_balance=50)
    await repository.insert(user)

    with pytest.raises(EntityValidationError) as exc_info:
        await use_case.execute({"id": str(user.user_id), "dust": -60})

    assert exc_info.value.fields == ["dust_balance"]
    assert (await repository.find_by_id(user.user_id)).dust_balance == 50


@pytest.mark.asyncio
async def test_add_dust_too_many_decimal_places_rejected(use_case, repository):
    """Test that an amount finer than the balance precision is rejected."""
    user = User.create("John Doe", dust_balance=1)
    await repository.insert(user)

    with pytest.raises(EntityValidationError):
        await use_case.execute({"id": str(user.user_id), "dust": 0.00001})

    assert (await repository.find_by_id(user.user_id)).dust_balance == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raw_id",
    [
        "e4b8c9d0123456789abcdef012345678",
        "{e4b8c9d0-1234-5678-9abc-def012345678}",
        "urn:uuid:e4b8c9d0-1234-5678-9abc-def012345678",
    ],
)
async def test_add_dust_non_canonical_id_rejected(use_case, raw_id):
    """Test that only hyphenated UUID ids pass input validation."""
    with pytest.raises(InputValidationError) as exc_info:
        await use_case.execute({"id": raw_id, "dust": 5})

    assert exc_info.value.fields == ["id"]
