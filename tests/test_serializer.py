"""Tests for record serialization."""

import pytest
from datetime import date
from decimal import Decimal

from record_cache import (
    CacheEntry,
    CacheEntryFormatError,
    JSONEncodedValue,
    RecordSerializer,
    RecordTypeRegistry,
    UnknownTypeError,
)

from sample_records import Apple, Person


@pytest.fixture
def serializer():
    return RecordSerializer()


class TestSerialize:
    """Test cases for RecordSerializer.serialize."""
    
    def test_entry_shape(self, serializer, sample_apple):
        entry = serializer.serialize(sample_apple)
        
        assert isinstance(entry, CacheEntry)
        assert entry.type_id == "Apple"
        assert entry.attributes == sample_apple.attributes_snapshot()
        assert entry.version == 3
    
    def test_entry_does_not_share_storage(self, serializer, sample_apple):
        entry = serializer.serialize(sample_apple)
        
        sample_apple.set("name", "Renamed")
        entry.attributes["price"] = 9.99
        
        assert entry.attributes["name"] == "Green Apple"
        assert sample_apple.get("price") == 0.49
    
    def test_record_without_version_attribute(self, serializer):
        entry = serializer.serialize(Person(id=1, first_name="Ada"))
        
        assert entry.version is None
        assert CacheEntry.VERSION_KEY not in entry.to_dict()


class TestDeserialize:
    """Test cases for RecordSerializer.deserialize."""
    
    def test_round_trip(self, serializer, sample_apple):
        record = serializer.deserialize(serializer.serialize(sample_apple))
        
        assert isinstance(record, Apple)
        assert record == sample_apple
        for attribute in Apple.attribute_names():
            assert record.get(attribute) == sample_apple.get(attribute)
    
    def test_round_trip_for_all_records(self, serializer, apples):
        for apple in apples:
            assert serializer.deserialize(serializer.serialize(apple)) == apple
    
    def test_bypasses_construction(self, serializer):
        record = serializer.deserialize(CacheEntry("Apple", {"id": 9, "name": "Pink Lady"}))
        
        assert record.get("stock") is None
        assert record.get("lock_version") is None
        assert "initialized" not in vars(record)
        assert not record.is_new_record
    
    def test_normal_construction_runs_callbacks(self):
        record = Apple(id=9)
        
        assert record.get("stock") == 0
        assert record.initialized is True
        assert record.is_new_record
    
    def test_serialized_attribute_decoded(self, serializer):
        raw = JSONEncodedValue.encode({"picked": date(2024, 5, 1), "weight": Decimal("0.25")})
        entry = CacheEntry("Apple", {"id": 1, "properties": raw})
        
        record = serializer.deserialize(entry)
        
        assert record.get("properties") == {"picked": date(2024, 5, 1), "weight": Decimal("0.25")}
        assert entry.attributes["properties"] is raw
    
    def test_plain_serialized_attribute_left_alone(self, serializer):
        record = serializer.deserialize(CacheEntry("Apple", {"id": 1, "properties": {"a": 1}}))
        
        assert record.get("properties") == {"a": 1}
    
    def test_only_declared_attributes_decoded(self, serializer):
        raw = JSONEncodedValue('"encoded"')
        
        record = serializer.deserialize(CacheEntry("Apple", {"id": 1, "name": raw}))
        
        assert record.get("name") is raw
    
    def test_undeclared_attributes_dropped(self, serializer):
        record = serializer.deserialize(CacheEntry("Apple", {"id": 1, "orchard": "north"}))
        
        assert "orchard" not in record.attributes_snapshot()
    
    def test_unknown_type(self, serializer):
        with pytest.raises(UnknownTypeError) as exc_info:
            serializer.deserialize(CacheEntry("Banana", {"id": 1}))
        
        assert exc_info.value.type_id == "Banana"
        assert exc_info.value.error_code == "RECORD_CACHE_UNKNOWN_TYPE"
    
    def test_custom_registry(self):
        registry = RecordTypeRegistry()
        serializer = RecordSerializer(registry=registry)
        entry = CacheEntry("Apple", {"id": 1})
        
        with pytest.raises(UnknownTypeError):
            serializer.deserialize(entry)
        
        registry.register(Apple)
        
        assert isinstance(serializer.deserialize(entry), Apple)


class TestCompactForm:
    """Test cases for the compact dict form."""
    
    def test_dump(self, serializer, sample_apple):
        data = serializer.dump(sample_apple)
        
        assert data["c"] == "Apple"
        assert data["a"]["name"] == "Green Apple"
        assert data["v"] == 3
    
    def test_load(self, serializer, sample_apple):
        assert serializer.load(serializer.dump(sample_apple)) == sample_apple
    
    def test_from_dict_copies_attributes(self):
        attributes = {"id": 1}
        
        entry = CacheEntry.from_dict({"c": "Apple", "a": attributes})
        entry.attributes["id"] = 2
        
        assert attributes == {"id": 1}
    
    @pytest.mark.parametrize("data", [
        None,
        ["Apple"],
        {"a": {"id": 1}},
        {"c": "", "a": {}},
        {"c": "Apple", "a": ["id", 1]},
    ])
    def test_malformed_entry(self, serializer, data):
        with pytest.raises(CacheEntryFormatError):
            serializer.load(data)
