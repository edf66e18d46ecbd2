"""Unit tests for ReadReceiptService."""

import pytest

from readproof.domain.error import ErrorCode, NotFoundError
from readproof.domain.repository import ReadReceiptRepository
from readproof.domain.service import NamingService, ReadReceiptService
from readproof.domain.value import Identity, ThreadId
from readproof.adapter.naming import MockNameResolver
from tests.conftest import FAKE_HASH, FAKE_SIGNATURE
from tests.harness import create_env_fixture
from tests.signing import ALICE, BOB

# Unit test fixture
unit_env = create_env_fixture()

THREAD = ThreadId("blog-1")


async def record(service, reader, thread_id=THREAD, signature=FAKE_SIGNATURE):
    return await service.record_read(
        thread_id=thread_id,
        reader=Identity(reader.address),
        signature=signature,
        message_hash=FAKE_HASH,
    )


class TestRecordRead:
    """Tests for record_read method."""

    @pytest.mark.asyncio
    async def test_first_signature_creates_receipt_with_name(self, unit_env):
        # Arrange
        service = await unit_env.get(ReadReceiptService)

        # Act
        receipt = await record(service, ALICE)

        # Assert
        assert receipt.thread_id == THREAD
        assert receipt.reader.root == ALICE.address.lower()
        assert receipt.display_name == "alice.eth"

    @pytest.mark.asyncio
    async def test_reader_without_name(self, unit_env):
        service = await unit_env.get(ReadReceiptService)

        receipt = await record(service, BOB)

        assert receipt.display_name is None

    @pytest.mark.asyncio
    async def test_signing_again_refreshes_single_receipt(self, unit_env):
        """Re-signing keeps one receipt per reader and thread."""
        # Arrange
        service = await unit_env.get(ReadReceiptService)
        repo = await unit_env.get(ReadReceiptRepository)
        first = await record(service, ALICE)
        new_signature = "0x" + "11" * 65

        # Act
        second = await record(service, ALICE, signature=new_signature)

        # Assert
        assert second.id == first.id
        assert second.signature == new_signature
        assert second.signed_at >= first.signed_at
        assert await repo.count_by_thread(THREAD) == 1

    @pytest.mark.asyncio
    async def test_cached_display_name_not_resolved_again(self, unit_env):
        # Arrange
        repo = await unit_env.get(ReadReceiptRepository)
        resolver = MockNameResolver({ALICE.address: "alice.eth"})
        service = ReadReceiptService(repo, NamingService(resolver))
        await record(service, ALICE)

        # Act
        await record(service, ALICE)

        # Assert
        assert resolver.calls == [ALICE.address.lower()]

    @pytest.mark.asyncio
    async def test_failing_resolver_still_records(self, unit_env):
        repo = await unit_env.get(ReadReceiptRepository)
        service = ReadReceiptService(repo, NamingService(MockNameResolver(fail=True)))

        receipt = await record(service, ALICE)

        assert receipt.display_name is None
        assert await repo.count_by_thread(THREAD) == 1


class TestListReaders:
    """Tests for list_readers method."""

    @pytest.mark.asyncio
    async def test_most_recent_first_with_count(self, unit_env):
        # Arrange
        service = await unit_env.get(ReadReceiptService)
        await record(service, ALICE)
        await record(service, BOB)
        await record(service, ALICE, thread_id=ThreadId("blog-2"))

        # Act
        page = await service.list_readers(THREAD)

        # Assert
        assert page.count == 2
        assert [r.reader.root for r in page.readers] == [
            BOB.address.lower(),
            ALICE.address.lower(),
        ]

    @pytest.mark.asyncio
    async def test_pagination(self, unit_env):
        service = await unit_env.get(ReadReceiptService)
        await record(service, ALICE)
        await record(service, BOB)

        page = await service.list_readers(THREAD, limit=1, offset=1)

        assert page.count == 2
        assert len(page.readers) == 1


class TestGetBadgeRecord:
    """Tests for get_badge_record method."""

    @pytest.mark.asyncio
    async def test_badge_record_for_signed_reader(self, unit_env):
        service = await unit_env.get(ReadReceiptService)
        receipt = await record(service, ALICE)

        badge = await service.get_badge_record(THREAD, Identity(ALICE.address.lower()))

        assert badge.identity.root == ALICE.address.lower()
        assert badge.display_name == "alice.eth"
        assert badge.signed_at == receipt.signed_at
        assert badge.signature == receipt.signature
        assert badge.thread_title is None

    @pytest.mark.asyncio
    async def test_badge_record_echoes_thread_metadata(self, unit_env):
        service = await unit_env.get(ReadReceiptService)
        await record(service, ALICE)

        badge = await service.get_badge_record(
            THREAD,
            Identity(ALICE.address),
            thread_title="On Reading",
            thread_date="2024-03-01",
        )

        assert badge.thread_title == "On Reading"
        assert badge.thread_date == "2024-03-01"

    @pytest.mark.asyncio
    async def test_badge_record_for_unsigned_reader(self, unit_env):
        service = await unit_env.get(ReadReceiptService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_badge_record(THREAD, Identity(BOB.address))
        assert exc_info.value.code is ErrorCode.READ_RECEIPT_NOT_FOUND
