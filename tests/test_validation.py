import logging

import httpx
import pytest

from oauth_shapes import (
    AuthorizationServerMetadata,
    ClientInformationFull,
    SchemaValidationError,
    TokenResponse,
    ViolationKind,
    WireSchema,
    merge,
    validate,
    validate_json,
    validate_response,
)
from oauth_shapes.schemas import AdditionalFields, wire_config


class Named(WireSchema):
    name: str


class Tagged(WireSchema):
    model_config = wire_config(AdditionalFields.PRESERVE)

    tag: str


class Closed(WireSchema):
    model_config = wire_config(AdditionalFields.REJECT)

    token: str


class Tokened(WireSchema):
    token: str


NamedTagged = merge(Named, Tagged)


def test_non_object_document():
    """Non-object input is a single type mismatch at the root"""
    for document in (["a"], "text", 42, None):
        result = validate(TokenResponse, document)
        assert not result.ok
        assert len(result.violations) == 1
        assert result.violations[0].path == ""
        assert result.violations[0].kind is ViolationKind.TYPE_MISMATCH


def test_non_object_document_merged_schema():
    result = validate(ClientInformationFull, ["https://a.example/cb"])
    assert [(v.path, v.kind) for v in result.violations] == [("", ViolationKind.TYPE_MISMATCH)]


def test_not_a_schema():
    with pytest.raises(TypeError):
        validate(dict, {})


def test_reject_policy():
    """Unknown fields are violations under the reject policy"""
    result = validate(Closed, {"token": "t", "other": 1})
    assert [(v.path, v.kind) for v in result.violations] == [("other", ViolationKind.UNKNOWN_FIELD)]
    assert validate(Closed, {"token": "t"}).ok


def test_merge_naming_and_policy():
    """Merged schema takes the second parent's additional-field policy"""
    assert NamedTagged.__name__ == "NamedTagged"
    assert NamedTagged.merged_from == (Named, Tagged)
    assert NamedTagged.additional_fields() is AdditionalFields.PRESERVE
    assert not Named.is_merged()
    assert NamedTagged.is_merged()


def test_merge_unions_results():
    value = validate(NamedTagged, {"name": "n", "tag": "t", "vendor": 1}).unwrap()
    assert value.name == "n"
    assert value.tag == "t"
    assert value.extra_fields() == {"vendor": 1}


def test_merge_keeps_null_extension_fields():
    value = validate(NamedTagged, {"name": "n", "tag": "t", "vendor": None}).unwrap()
    assert value.extra_fields() == {"vendor": None}
    assert value.to_wire() == {"name": "n", "tag": "t", "vendor": None}


def test_merge_requires_schemas():
    with pytest.raises(TypeError):
        merge(dict, Named)


def test_merge_of_merged_schema():
    """Merges compose: a merged schema can itself be merged"""
    triple = merge(NamedTagged, Tokened, name="Triple")
    assert validate(triple, {"name": "n", "tag": "t", "token": "x"}).ok

    result = validate(triple, {"name": "n", "token": "x"})
    paths = [(v.path, v.kind) for v in result.violations]
    assert ("tag", ViolationKind.MISSING_FIELD) in paths
    assert [v.message for v in result.violations_at("")] == [
        "Document does not satisfy Tagged",
        "Document does not satisfy NamedTagged",
    ]


def test_validation_is_idempotent(metadata_document):
    metadata_document["x_vendor"] = "v"
    first = validate(AuthorizationServerMetadata, metadata_document).unwrap()
    second = validate(AuthorizationServerMetadata, first.to_wire()).unwrap()
    assert first == second
    assert second.to_wire() == first.to_wire()


def test_validate_json():
    text = '{"access_token": "at", "token_type": "Bearer", "expires_in": 60, "foo": "bar"}'
    token = validate_json(TokenResponse, text).unwrap()
    assert token.to_wire() == {"access_token": "at", "token_type": "Bearer", "expires_in": 60}


def test_validate_json_invalid():
    """Unparseable JSON is a root type mismatch, never an exception"""
    result = validate_json(TokenResponse, b"{not json")
    assert len(result.violations) == 1
    assert result.violations[0].path == ""
    assert result.violations[0].kind is ViolationKind.TYPE_MISMATCH
    assert result.violations[0].message.startswith("Invalid JSON")


def test_validate_json_array():
    result = validate_json(TokenResponse, "[]")
    assert result.violations[0].kind is ViolationKind.TYPE_MISMATCH


def test_validate_response(token_document):
    """Body of an already received httpx response is validated"""
    response = httpx.Response(200, json=token_document)
    token = validate_response(TokenResponse, response).unwrap()
    assert token.access_token == "at_abc"


def test_unwrap_raises():
    result = validate(TokenResponse, {})
    with pytest.raises(SchemaValidationError) as exc_info:
        result.unwrap()
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.schema == "TokenResponse"
    assert exc_info.value.violations == result.violations
    assert "access_token: Field required" in str(exc_info.value)


def test_rejections_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="oauth_shapes.validation")
    validate(TokenResponse, {"token_type": "Bearer"})
    assert "Rejected TokenResponse with 1 violation(s)" in caplog.text
    assert "access_token" in caplog.text


def test_rejection_logging_disabled(caplog, monkeypatch):
    monkeypatch.setenv("OAUTH_SHAPES_LOG_REJECTIONS", "false")
    caplog.set_level(logging.DEBUG, logger="oauth_shapes.validation")
    validate(TokenResponse, {"token_type": "Bearer"})
    assert "Rejected" not in caplog.text
