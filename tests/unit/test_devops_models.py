"""Unit tests for app/core/devops/models.py and codec.py."""
import json
from dataclasses import FrozenInstanceError

import pytest

from app.core.devops import (
    DecodeError,
    DevOps,
    Developer,
    EncodeError,
    Engineer,
    Operations,
    decode,
    decode_list,
    encode,
)

ALICE = Engineer(id="eng-1", name="Alice", email="alice@example.com")
BOB = Engineer(id="eng-2", name="Bob", email="bob@example.com")


def test_engineer_round_trip():
    assert decode(encode(ALICE), Engineer) == ALICE


def test_engineer_encode_emits_only_model_fields():
    assert json.loads(encode(ALICE)) == {"id": "eng-1", "name": "Alice", "email": "alice@example.com"}


def test_create_payload_omits_id():
    assert json.loads(encode(ALICE, include_id=False)) == {"name": "Alice", "email": "alice@example.com"}
    assert "id" not in json.loads(encode(Engineer(name="New", email="new@example.com")))


def test_team_keeps_engineer_order_and_duplicates():
    body = json.dumps({"id": "dev-1", "name": "Frontend", "engineers": [
        BOB.to_dict(), ALICE.to_dict(), BOB.to_dict(),
    ]}).encode()

    team = decode(body, Developer)

    assert team.engineer_ids() == ("eng-2", "eng-1", "eng-2")
    assert team.engineers[1] == ALICE


def test_empty_engineers_list_is_an_empty_tuple_and_encodes_as_list():
    team = decode(b'{"id": "dev-1", "name": "Frontend Team", "engineers": []}', Developer)

    assert team.engineers == ()
    assert json.loads(encode(team))["engineers"] == []


@pytest.mark.parametrize("body", [
    b'{"id": "ops-1", "name": "SRE"}',
    b'{"id": "ops-1", "name": "SRE", "engineers": null}',
])
def test_absent_or_null_engineers_decode_as_empty(body):
    assert decode(body, Operations).engineers == ()


@pytest.mark.parametrize("body, field", [
    (b'{"name": "Frontend", "engineers": []}', "id"),
    (b'{"id": "dev-1", "engineers": []}', "name"),
])
def test_team_missing_identifying_field_fails(body, field):
    with pytest.raises(DecodeError) as excinfo:
        decode(body, Developer)
    assert f"'{field}'" in excinfo.value.message
    assert excinfo.value.body == body


@pytest.mark.parametrize("body, shape, field", [
    (b'{"id": "", "name": "John Doe", "email": "j@example.com"}', Engineer, "id"),
    (b'{"id": "", "name": "Frontend", "engineers": []}', Developer, "id"),
    (b'{"id": "dev-1", "name": "", "engineers": []}', Developer, "name"),
    (b'{"id": "", "dev": {"id": "dev-1", "name": "Web"}, "ops": {"id": "ops-1", "name": "SRE"}}', DevOps, "id"),
])
def test_empty_identifying_field_fails(body, shape, field):
    with pytest.raises(DecodeError) as excinfo:
        decode(body, shape)
    assert f"'{field}' is empty" in excinfo.value.message


def test_nested_engineer_missing_id_fails():
    body = b'{"id": "dev-1", "name": "Frontend", "engineers": [{"name": "Ghost"}]}'
    with pytest.raises(DecodeError):
        decode(body, Developer)


def test_engineer_without_email_decodes_as_empty_string():
    assert decode(b'{"id": "eng-9", "name": "Solo"}', Engineer) == Engineer(id="eng-9", name="Solo", email="")


@pytest.mark.parametrize("body", [
    b"not json",
    b"\xff\xfe",
    b'["not", "an", "object"]',
    b'{"id": 42, "name": "x"}',
    b'{"id": "dev-1", "name": "x", "engineers": {"id": "eng-1"}}',
])
def test_malformed_bodies_raise_decode_error(body):
    with pytest.raises(DecodeError):
        decode(body, Developer)


def test_decode_list_preserves_order_and_handles_empty():
    body = json.dumps([BOB.to_dict(), ALICE.to_dict()]).encode()

    assert decode_list(body, Engineer) == [BOB, ALICE]
    assert decode_list(b"[]", Engineer) == []


def test_decode_list_requires_array():
    with pytest.raises(DecodeError):
        decode_list(b'{"id": "eng-1"}', Engineer)


def test_devops_nests_teams_with_standalone_shape():
    dev = Developer(id="dev-1", name="Frontend", engineers=(ALICE,))
    ops = Operations(id="ops-1", name="SRE", engineers=(BOB,))
    devops = DevOps(id="devops-1", dev=dev, ops=ops)

    payload = json.loads(encode(devops))

    assert payload["dev"] == dev.to_dict()
    assert payload["ops"] == ops.to_dict()
    assert decode(encode(devops), DevOps) == devops


@pytest.mark.parametrize("missing", ["dev", "ops"])
def test_devops_requires_both_teams(missing):
    data = {"id": "devops-1", "dev": {"id": "dev-1", "name": "d"}, "ops": {"id": "ops-1", "name": "o"}}
    del data[missing]
    with pytest.raises(DecodeError):
        decode(json.dumps(data).encode(), DevOps)


def test_developer_and_operations_are_distinct_types():
    assert Developer(id="x", name="t") != Operations(id="x", name="t")


def test_entities_are_immutable():
    with pytest.raises(FrozenInstanceError):
        ALICE.name = "Mallory"


def test_team_stores_a_copy_of_the_engineers():
    members = [ALICE]
    team = Developer(id="dev-1", name="Frontend", engineers=members)
    members.append(BOB)

    assert team.engineers == (ALICE,)
    assert team.with_engineers([BOB]).engineers == (BOB,)
    assert team.engineers == (ALICE,)


def test_unserializable_value_raises_encode_error():
    with pytest.raises(EncodeError):
        encode(Engineer(id="eng-1", name={"not", "json"}, email="x@example.com"))
