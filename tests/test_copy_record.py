"""
Unit tests for copy records.
"""

import pytest

from pica_record import (
    ChildKeyCollision,
    CopyRecord,
    DuplicateField,
    Field,
    InvalidLevel,
    ItemNumberMismatch,
    LocalRecord,
    Subfield,
)


class TestCopyRecordAppend:
    """Test the level and item number restrictions."""

    def test_item_number_from_first_field(self):
        record = CopyRecord()
        assert record.item_number is None
        record.append(Field('201@', 11))
        assert record.item_number == 11
        record.append(Field('203@', 11))
        assert len(record.get_fields()) == 2

    def test_append_rejects_invalid_level(self):
        record = CopyRecord()
        with pytest.raises(InvalidLevel):
            record.append(Field('101@', 0))
        assert record.is_empty()
        assert record.item_number is None

    def test_append_rejects_item_number_mismatch(self):
        record = CopyRecord([Field('201@', 11)])
        with pytest.raises(ItemNumberMismatch):
            record.append(Field('201@', 12))
        assert len(record.get_fields()) == 1

    def test_append_duplicate_keeps_item_number(self):
        field = Field('201@', 11)
        record = CopyRecord([field])
        with pytest.raises(DuplicateField):
            record.append(field)
        assert record.item_number == 11

    def test_set_fields_restores_item_number(self):
        record = CopyRecord([Field('201@', 11)])
        with pytest.raises(ItemNumberMismatch):
            record.set_fields([Field('201@', 12), Field('203@', 13)])
        assert record.item_number == 11
        assert record.get_fields()[0].occurrence == 11

    def test_first_field_must_not_collide_with_sibling(self):
        local = LocalRecord()
        local.add_copy_record(CopyRecord([Field('201@', 11)]))
        empty = CopyRecord()
        local.add_copy_record(empty)
        with pytest.raises(ChildKeyCollision):
            empty.append(Field('201@', 11))
        assert empty.is_empty()
        empty.append(Field('201@', 12))
        assert empty.item_number == 12


class TestCopyRecordEPN:
    """Test getting and setting the EPN."""

    def test_get_epn(self):
        record = CopyRecord([Field('201@', 3)])
        assert record.get_epn() is None
        record.append(Field('203@', 3, [Subfield('0', '1001')]))
        assert record.get_epn() == '1001'

    def test_set_epn_creates_field(self):
        record = CopyRecord([Field('201@', 3)])
        record.set_epn('1001')
        assert record.get_epn() == '1001'
        assert record.get_fields('203@')[0].shorthand == '203@/03'

    def test_set_epn_replaces_value(self):
        record = CopyRecord([Field('203@', 3, [Subfield('0', '1001')])])
        record.set_epn('2002')
        assert record.get_epn() == '2002'
        assert len(record.get_fields()) == 1


class TestCopyRecordLocalRecordReference:
    """Test the back-reference to the local record."""

    def test_set_local_record(self):
        local = LocalRecord()
        record = CopyRecord([Field('201@', 11)])
        assert record.get_local_record() is None
        record.set_local_record(local)
        assert record.get_local_record() is local
        assert local.contains_copy_record(record)

    def test_set_local_record_twice(self):
        local = LocalRecord()
        record = CopyRecord([Field('201@', 11)])
        record.set_local_record(local)
        record.set_local_record(local)
        assert local.get_copy_records() == [record]

    def test_set_local_record_moves_record(self):
        first = LocalRecord()
        second = LocalRecord()
        record = CopyRecord([Field('201@', 11)])
        record.set_local_record(first)
        record.set_local_record(second)
        assert record.get_local_record() is second
        assert not first.contains_copy_record(record)
        assert second.contains_copy_record(record)

    def test_set_local_record_collision_keeps_link(self):
        first = LocalRecord()
        second = LocalRecord()
        second.add_copy_record(CopyRecord([Field('201@', 11)]))
        record = CopyRecord([Field('201@', 11)])
        record.set_local_record(first)
        with pytest.raises(ChildKeyCollision):
            record.set_local_record(second)
        assert record.get_local_record() is first
        assert first.contains_copy_record(record)

    def test_unset_local_record(self):
        local = LocalRecord()
        record = CopyRecord([Field('201@', 11)])
        local.add_copy_record(record)
        record.unset_local_record()
        assert record.get_local_record() is None
        assert not local.contains_copy_record(record)

    def test_set_local_record_rejects_other_records(self):
        with pytest.raises(TypeError):
            CopyRecord().set_local_record(CopyRecord())


class TestCopyRecordClone:
    """Test cloning copy records."""

    def test_clone_is_detached(self):
        local = LocalRecord()
        record = CopyRecord([Field('201@', 11, [Subfield('a', 'x')])])
        local.add_copy_record(record)
        clone = record.clone()
        assert clone.get_local_record() is None
        assert clone.item_number == 11
        assert clone.get_fields()[0] is not record.get_fields()[0]
        assert local.get_copy_records() == [record]

    def test_clone_keeps_item_number_of_empty_record(self):
        record = CopyRecord([Field('201@', 11)])
        record.delete(Field.match('201@'))
        assert record.clone().item_number == 11
