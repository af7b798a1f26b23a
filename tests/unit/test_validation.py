import datetime
from decimal import Decimal

import orjson
import pytest
from bson import Binary, ObjectId

from to_plain import ABSENT, NotSerializableError, ensure_serializable, to_plain


def test_plain_values_pass_through():
    value = {"a": [1, "x", None, True, 1.5], "b": {"c": []}}
    assert ensure_serializable(value) is value


@pytest.mark.parametrize(
    "value",
    [
        b"raw",
        Decimal("1.5"),
        {1, 2},
        {1: "non-string key"},
        datetime.datetime(2024, 1, 1),
        ABSENT,
    ],
)
def test_leftover_special_values_are_rejected(value):
    with pytest.raises(NotSerializableError) as excinfo:
        ensure_serializable(value)
    assert isinstance(excinfo.value.__cause__, orjson.JSONEncodeError)


def test_converted_documents_are_serializable():
    document = {
        "_id": ObjectId(),
        "total": Decimal("19.99"),
        "attachment": Binary(b"\x01\x02"),
        "created": datetime.datetime(2024, 5, 6, 7, 8, 9),
        "tags": ("a", "b"),
        "error": ValueError("bad"),
    }
    plain = ensure_serializable(to_plain(document))

    decoded = orjson.loads(orjson.dumps(plain))
    assert decoded["_id"] == str(document["_id"])
    assert decoded["total"] == 19.99
    assert decoded["attachment"] == [1, 2]
    assert decoded["created"] == "2024-05-06T07:08:09"
    assert decoded["tags"] == ["a", "b"]
    assert decoded["error"]["name"] == "ValueError"
