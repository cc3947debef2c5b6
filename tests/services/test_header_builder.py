import pytest

from utilkit._services._headers import HeaderBuilder


@pytest.fixture
def builder() -> HeaderBuilder:
    return HeaderBuilder()


class TestHeaderBuilder:
    @pytest.mark.asyncio
    async def test_adds_defaults(self, builder: HeaderBuilder):
        headers = await builder.build("https://example.test/a", None, "default", "post")

        assert headers["Accept"] == "application/json, text/plain, */*"
        assert headers["path"] == "https://example.test/a"
        assert headers["method"] == "POST"
        assert headers["Sec-Fetch-Mode"] == "cors"
        assert headers["Sec-Fetch-Site"] == "same-origin"
        assert headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_method_defaults_to_get(self, builder: HeaderBuilder):
        headers = await builder.build("https://example.test", {}, "default")

        assert headers["method"] == "GET"

    @pytest.mark.asyncio
    async def test_caller_headers_win_case_insensitively(self, builder: HeaderBuilder):
        headers = await builder.build(
            "https://example.test",
            {"accept": "text/html", "content-type": "text/plain", "X-Custom": "1"},
            "default",
            "get",
        )

        assert headers.get_list("Accept") == ["text/html"]
        assert headers.get_list("Content-Type") == ["text/plain"]
        assert headers["x-custom"] == "1"

    @pytest.mark.asyncio
    async def test_pass_through_body_leaves_content_type_unset(
        self, builder: HeaderBuilder
    ):
        headers = await builder.build("https://example.test", None, "auto", "post")

        assert "Content-Type" not in headers

    @pytest.mark.asyncio
    async def test_explicit_codec_content_type(self, builder: HeaderBuilder):
        headers = await builder.build(
            "https://example.test", None, "application/xml", "put"
        )

        assert headers["Content-Type"] == "application/xml"

    @pytest.mark.asyncio
    async def test_resolves_sync_header_provider(self, builder: HeaderBuilder):
        headers = await builder.build(
            "https://example.test", lambda: {"Authorization": "Bearer a"}, "default"
        )

        assert headers["Authorization"] == "Bearer a"

    @pytest.mark.asyncio
    async def test_resolves_async_header_provider(self, builder: HeaderBuilder):
        async def sign():
            return {"X-Signature": "abc"}

        headers = await builder.build("https://example.test", sign, "default")

        assert headers["X-Signature"] == "abc"
        assert headers["Accept"] == "application/json, text/plain, */*"
