import json

import pytest

from utilkit._services._body import BodyCodec, EncodedBody, PassThroughBody
from utilkit.models.errors import EncodingError
from utilkit.models.request import FormData


@pytest.fixture
def codec() -> BodyCodec:
    return BodyCodec()


class TestBodyCodec:
    def test_encodes_json_values(self, codec: BodyCodec):
        body = {"name": "test", "items": [1, 2.5, True, None], "nested": {"a": "b"}}

        encoded = codec.encode(body)

        assert isinstance(encoded, EncodedBody)
        assert encoded.content_type == "default"
        assert encoded.content is not None
        assert json.loads(encoded.content) == body

    def test_encodes_scalar_strings_as_json(self, codec: BodyCodec):
        encoded = codec.encode("hello")

        assert isinstance(encoded, EncodedBody)
        assert encoded.content == b'"hello"'

    def test_none_means_no_body(self, codec: BodyCodec):
        encoded = codec.encode(None)

        assert isinstance(encoded, EncodedBody)
        assert encoded.content is None
        assert encoded.content_type == "default"

    def test_form_data_passes_through(self, codec: BodyCodec):
        form = FormData({"field": "value"})

        encoded = codec.encode(form)

        assert isinstance(encoded, PassThroughBody)
        assert encoded.form is form
        assert encoded.content_type == "auto"

    def test_cyclic_body_is_rejected(self, codec: BodyCodec):
        body: dict = {"name": "loop"}
        body["self"] = body

        with pytest.raises(EncodingError):
            codec.encode(body)

    @pytest.mark.parametrize("body", [object(), {1, 2}, float("nan")])
    def test_non_json_values_are_rejected(self, codec: BodyCodec, body):
        with pytest.raises(EncodingError, match="not JSON serializable"):
            codec.encode(body)
