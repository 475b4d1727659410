"""Tests for upstream clients against mocked HTTP transports."""

import httpx
import pytest
from fakes import article, forecast_payload, japan_record, news_payload

from pulse_client import (
    CountriesClient,
    CountryNotFoundError,
    NewsClient,
    NewsDegraded,
    NewsFetched,
    UpstreamError,
    WeatherClient,
    WeatherUnavailableError,
)
from pulse_client.base import _is_retryable_error


def countries_client(handler) -> CountriesClient:
    return CountriesClient(base_url="https://countries.test/v3.1", transport=httpx.MockTransport(handler))


def weather_client(handler) -> WeatherClient:
    return WeatherClient(base_url="https://weather.test/v1", transport=httpx.MockTransport(handler))


def news_client(handler, api_key: str = "secret") -> NewsClient:
    return NewsClient(api_key=api_key, base_url="https://news.test/api/1", transport=httpx.MockTransport(handler))


def json_handler(status: int, payload, seen: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status, json=payload)

    return handler


def failing_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


class TestCountriesClient:
    @pytest.mark.asyncio
    async def test_first_candidate_wins(self):
        seen = []
        other = japan_record(name={"common": "Japan Other"})
        client = countries_client(json_handler(200, [japan_record(), other], seen))
        async with client:
            country = await client.by_name("Japan")

        assert country.name.common == "Japan"
        assert country.capital_name == "Tokyo"
        assert country.capital_coordinates == (35.6, 139.7)
        assert seen[0].url.path == "/v3.1/name/Japan"

    @pytest.mark.asyncio
    async def test_name_is_path_encoded(self):
        seen = []
        client = countries_client(json_handler(200, [japan_record()], seen))
        async with client:
            await client.by_name("Côte d'Ivoire")

        assert seen[0].url.raw_path == b"/v3.1/name/C%C3%B4te%20d%27Ivoire"

    @pytest.mark.asyncio
    async def test_non_success_is_not_found(self):
        client = countries_client(json_handler(404, {"status": 404}))
        async with client:
            with pytest.raises(CountryNotFoundError) as exc_info:
                await client.by_name("Atlantis")

        assert exc_info.value.name == "Atlantis"

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        client = countries_client(failing_handler)
        async with client:
            with pytest.raises(UpstreamError) as exc_info:
                await client.by_name("Japan")

        assert not isinstance(exc_info.value, CountryNotFoundError)

    @pytest.mark.asyncio
    async def test_missing_capital_is_parsed(self):
        record = japan_record(capital=[], capitalInfo={})
        client = countries_client(json_handler(200, [record]))
        async with client:
            country = await client.by_name("Japan")

        assert country.capital_name is None
        assert country.capital_coordinates is None

    @pytest.mark.asyncio
    async def test_malformed_payload(self):
        client = countries_client(json_handler(200, [{"capital": ["X"]}]))
        async with client:
            with pytest.raises(UpstreamError):
                await client.by_name("Japan")

    @pytest.mark.asyncio
    async def test_catalogue_requests_minimal_fields(self):
        seen = []
        payload = [{"name": {"common": "Japan"}, "cca2": "JP", "flags": {"svg": "jp.svg"}}]
        client = countries_client(json_handler(200, payload, seen))
        async with client:
            countries = await client.all()

        assert [c.cca2 for c in countries] == ["JP"]
        assert seen[0].url.params["fields"] == "name,cca2,flags"

    @pytest.mark.asyncio
    async def test_catalogue_failure(self):
        client = countries_client(json_handler(500, {}))
        async with client:
            with pytest.raises(UpstreamError):
                await client.all()

    @pytest.mark.asyncio
    async def test_requires_open(self):
        with pytest.raises(RuntimeError):
            await CountriesClient(base_url="https://countries.test/v3.1").by_name("Japan")


class TestWeatherClient:
    @pytest.mark.asyncio
    async def test_forecast_params(self):
        seen = []
        client = weather_client(json_handler(200, forecast_payload(), seen))
        async with client:
            forecast = await client.forecast(35.6, 139.7)

        params = seen[0].url.params
        assert seen[0].url.path == "/v1/forecast"
        assert params["latitude"] == "35.6"
        assert params["longitude"] == "139.7"
        assert params["current_weather"] == "true"
        assert params["daily"] == "temperature_2m_max,temperature_2m_min"
        assert params["timezone"] == "auto"
        assert params["forecast_days"] == "3"
        assert forecast.current_weather.weathercode == 1
        assert len(forecast.daily.time) == 3

    @pytest.mark.asyncio
    async def test_non_success_is_unavailable(self):
        client = weather_client(json_handler(503, {}))
        async with client:
            with pytest.raises(WeatherUnavailableError):
                await client.forecast(35.6, 139.7)

    @pytest.mark.asyncio
    async def test_transport_failure_is_unavailable(self):
        client = weather_client(failing_handler)
        async with client:
            with pytest.raises(WeatherUnavailableError):
                await client.forecast(35.6, 139.7)

    @pytest.mark.asyncio
    async def test_malformed_payload_is_unavailable(self):
        client = weather_client(json_handler(200, {"daily": {}}))
        async with client:
            with pytest.raises(WeatherUnavailableError):
                await client.forecast(35.6, 139.7)

    @pytest.mark.asyncio
    async def test_missing_daily_block_is_unavailable(self):
        payload = forecast_payload()
        del payload["daily"]
        client = weather_client(json_handler(200, payload))
        async with client:
            with pytest.raises(WeatherUnavailableError):
                await client.forecast(35.6, 139.7)

    @pytest.mark.asyncio
    async def test_fewer_than_three_days_is_unavailable(self):
        client = weather_client(json_handler(200, forecast_payload(days=2)))
        async with client:
            with pytest.raises(WeatherUnavailableError):
                await client.forecast(35.6, 139.7)


class TestNewsClient:
    @pytest.mark.asyncio
    async def test_articles(self):
        seen = []
        client = news_client(json_handler(200, news_payload(2), seen))
        async with client:
            result = await client.search("Japan")

        assert isinstance(result, NewsFetched)
        assert [a.title for a in result.articles] == ["Headline 0", "Headline 1"]
        assert result.articles[0].source == "Example Times"
        params = seen[0].url.params
        assert params["q"] == "Japan"
        assert params["apikey"] == "secret"
        assert params["language"] == "en"
        assert params["size"] == "5"

    @pytest.mark.asyncio
    async def test_no_key_skips_request(self):
        seen = []
        client = news_client(json_handler(200, news_payload(), seen), api_key="")
        async with client:
            result = await client.search("Japan")

        assert isinstance(result, NewsDegraded)
        assert seen == []

    @pytest.mark.asyncio
    async def test_provider_error_status(self):
        payload = {"status": "error", "results": {"message": "API key is invalid", "code": "Unauthorized"}}
        client = news_client(json_handler(200, payload), api_key="bad")
        async with client:
            result = await client.search("Japan")

        assert result == NewsDegraded("API key is invalid")

    @pytest.mark.asyncio
    async def test_http_error_degrades(self):
        client = news_client(json_handler(401, {}))
        async with client:
            result = await client.search("Japan")

        assert result == NewsDegraded("HTTP 401")

    @pytest.mark.asyncio
    async def test_transport_failure_degrades(self):
        client = news_client(failing_handler)
        async with client:
            result = await client.search("Japan")

        assert isinstance(result, NewsDegraded)
        assert "secret" not in result.reason

    @pytest.mark.asyncio
    async def test_source_id_fallback(self):
        item = article(0)
        del item["source_name"]
        item["source_id"] = "example"
        payload = {"status": "success", "totalResults": 1, "results": [item]}
        client = news_client(json_handler(200, payload))
        async with client:
            result = await client.search("Japan")

        assert result.articles[0].source == "example"


class TestRetryPolicy:
    def test_transport_errors_are_retryable(self):
        request = httpx.Request("GET", "https://upstream.test/")
        assert _is_retryable_error(httpx.ConnectError("refused", request=request))
        assert _is_retryable_error(httpx.ReadTimeout("slow", request=request))

    def test_http_statuses_are_not_retryable(self):
        request = httpx.Request("GET", "https://upstream.test/")
        for status in (404, 500, 503):
            response = httpx.Response(status, request=request)
            error = httpx.HTTPStatusError(f"HTTP {status}", request=request, response=response)
            assert not _is_retryable_error(error)

    def test_other_errors_are_not_retryable(self):
        assert not _is_retryable_error(ValueError("bad json"))
