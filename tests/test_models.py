from swag_docs.parser.base import Param, Endpoint


class TestParam:
    def test_defaults(self):
        p = Param(name="limit")
        assert p.param_type == "string"
        assert p.required is False
        assert p.description == ""

    def test_dump_uses_table_keys(self):
        p = Param(name="id", param_type="integer", required=True, location="path")
        data = p.model_dump(by_alias=True)
        assert data == {
            "type": "integer",
            "required": True,
            "in": "path",
            "description": "",
        }
        assert list(data) == ["type", "required", "in", "description"]


class TestEndpoint:
    def test_key_and_accessors(self):
        ep = Endpoint(
            path="/api/users/{id}",
            method="GET",
            operation={"operationId": "getUser", "summary": "Get a user"},
        )
        assert ep.key == "GET:/api/users/{id}"
        assert ep.summary == "Get a user"
        assert ep.operation_id == "getUser"

    def test_missing_summary_is_empty(self):
        ep = Endpoint(path="/health", method="GET", operation={"operationId": "health"})
        assert ep.summary == ""

    def test_serialization_roundtrip(self):
        ep = Endpoint(path="/pets", method="POST", operation={"summary": "Create"})
        ep2 = Endpoint(**ep.model_dump())
        assert ep2.key == "POST:/pets"
        assert ep2.operation == {"summary": "Create"}
