"""Tests for Colorado query shaping and record normalization."""

import httpx
import pytest
from respx import MockRouter

from conftest import CO_HOST
from conftest import CO_PATH
from lookup.colorado import SearchType
from lookup.colorado import build_request
from lookup.colorado import capitalize_name
from lookup.colorado import normalize_record
from lookup.colorado import resolve_search
from lookup.colorado import search
from lookup.colorado import split_name
from lookup.config import UpstreamConfig
from lookup.upstream import UpstreamConnectionError


class TestSplitName:
    """Tests for split_name function."""

    def test_first_and_last(self) -> None:
        """A pair of tokens becomes capitalized first and last names."""
        assert split_name("john smith") == ("John", "Smith")

    def test_mixed_case_pair(self) -> None:
        """Each part is capitalized independently."""
        assert split_name("jOHN SMITH") == ("John", "Smith")

    def test_single_token_is_last_name(self) -> None:
        """Without whitespace the whole text is the last name."""
        assert split_name("SMITH") == (None, "Smith")

    def test_remaining_tokens_form_last_name(self) -> None:
        """Everything after the first token is the last name."""
        assert split_name("mary van dyke") == ("Mary", "Van dyke")

    def test_surrounding_whitespace_ignored(self) -> None:
        """Leading and trailing whitespace is not a separator."""
        assert split_name("  smith  ") == (None, "Smith")

    def test_capitalize_name(self) -> None:
        """First letter upper, the rest lower."""
        assert capitalize_name("mcDONALD") == "Mcdonald"


class TestResolveSearch:
    """Tests for resolve_search function."""

    def test_infers_name(self) -> None:
        """Only a name means a name search."""
        assert resolve_search(None, "john smith", None) == (
            SearchType.NAME,
            "john smith",
        )

    def test_infers_license(self) -> None:
        """Only a license number means a license search."""
        assert resolve_search(None, None, "RN.0012345") == (
            SearchType.LICENSE,
            "RN.0012345",
        )

    def test_explicit_type_picks_value(self) -> None:
        """An explicit searchType selects its value even if both are given."""
        assert resolve_search(SearchType.LICENSE, "smith", "RN.1") == (
            SearchType.LICENSE,
            "RN.1",
        )

    def test_both_without_type_rejected(self) -> None:
        """Two search values without a searchType is ambiguous."""
        with pytest.raises(ValueError, match="either"):
            resolve_search(None, "smith", "RN.1")

    def test_nothing_rejected(self) -> None:
        """A search needs a value."""
        with pytest.raises(ValueError, match="required"):
            resolve_search(None, None, None)

    def test_blank_value_rejected(self) -> None:
        """Whitespace-only values count as missing."""
        with pytest.raises(ValueError, match="name is required"):
            resolve_search(SearchType.NAME, "   ", None)

    def test_type_without_matching_value(self) -> None:
        """searchType=license requires licensenumber."""
        with pytest.raises(ValueError, match="licensenumber is required"):
            resolve_search(SearchType.LICENSE, "smith", None)


class TestBuildRequest:
    """Tests for build_request function."""

    def test_name_pair_params(self, upstream_config: UpstreamConfig) -> None:
        """A full name is sent as capitalized firstname/lastname."""
        request = build_request(SearchType.NAME, "john smith", upstream_config)
        assert request.method == "GET"
        assert request.url == upstream_config.co_api_url
        assert request.params == {"firstname": "John", "lastname": "Smith"}

    def test_single_name_params(self, upstream_config: UpstreamConfig) -> None:
        """A single token is sent as lastname only."""
        request = build_request(SearchType.NAME, "smith", upstream_config)
        assert request.params == {"lastname": "Smith"}

    def test_license_number_untouched(self, upstream_config: UpstreamConfig) -> None:
        """License numbers are sent as given."""
        request = build_request(SearchType.LICENSE, "rn.0012345", upstream_config)
        assert request.params == {"licensenumber": "rn.0012345"}

    def test_app_token_header(self, upstream_config: UpstreamConfig) -> None:
        """The Socrata app token is sent when configured."""
        request = build_request(SearchType.LICENSE, "RN.1", upstream_config)
        assert request.headers == {"X-App-Token": upstream_config.co_app_token}

    def test_no_token_no_header(self) -> None:
        """No token configured means no X-App-Token header."""
        request = build_request(SearchType.LICENSE, "RN.1", UpstreamConfig())
        assert "X-App-Token" not in request.headers


class TestNormalizeRecord:
    """Tests for normalize_record function."""

    def test_dates_reformatted(self, colorado_record: dict) -> None:
        """Every present date column becomes MM/DD/YYYY."""
        record = normalize_record(colorado_record)
        assert record["licensefirstissuedate"] == "05/13/2014"
        assert record["licenselastreneweddate"] == "09/30/2022"
        assert record["licenseexpirationdate"] == "09/30/2024"

    def test_discipline_date_reformatted(self) -> None:
        """The discipline effective date is normalized too."""
        record = normalize_record({"disciplineeffectivedate": "2019-01-02T00:00:00.000"})
        assert record["disciplineeffectivedate"] == "01/02/2019"

    def test_absent_dates_stay_absent(self, colorado_record: dict) -> None:
        """No date is fabricated for a column the registry omitted."""
        record = normalize_record(colorado_record)
        assert "disciplineeffectivedate" not in record

    def test_null_dates_stay_null(self) -> None:
        """A null date column stays null."""
        record = normalize_record({"licenseexpirationdate": None})
        assert record == {"licenseexpirationdate": None}

    def test_unparseable_date_kept(self) -> None:
        """A value that is not a date is returned unchanged."""
        record = normalize_record({"licenseexpirationdate": "N/A"})
        assert record["licenseexpirationdate"] == "N/A"

    def test_other_fields_untouched(self, colorado_record: dict) -> None:
        """Non-date columns pass through and the input is not mutated."""
        record = normalize_record(colorado_record)
        assert record["linktoverifylicense"] == colorado_record["linktoverifylicense"]
        assert record["lastname"] == "Smith"
        assert colorado_record["licensefirstissuedate"] == "2014-05-13T00:00:00.000"


class TestSearch:
    """Tests for the async Colorado search."""

    @pytest.mark.asyncio
    async def test_search_normalizes_records(
        self,
        upstream_config: UpstreamConfig,
        colorado_record: dict,
        respx_mock: MockRouter,
    ) -> None:
        """Returned records have their dates reformatted."""
        route = respx_mock.get(host=CO_HOST, path=CO_PATH).mock(
            return_value=httpx.Response(200, json=[colorado_record])
        )

        async with httpx.AsyncClient() as http_client:
            records = await search(
                http_client, SearchType.NAME, "john smith", upstream_config
            )

        assert records[0]["licenseexpirationdate"] == "09/30/2024"
        sent = route.calls.last.request
        assert sent.url.params["firstname"] == "John"
        assert sent.url.params["lastname"] == "Smith"
        assert sent.headers["X-App-Token"] == upstream_config.co_app_token

    @pytest.mark.asyncio
    async def test_search_rejects_non_array(
        self, upstream_config: UpstreamConfig, respx_mock: MockRouter
    ) -> None:
        """A JSON object instead of an array is an unusable body."""
        respx_mock.get(host=CO_HOST, path=CO_PATH).mock(
            return_value=httpx.Response(200, json={"error": True})
        )

        async with httpx.AsyncClient() as http_client:
            with pytest.raises(UpstreamConnectionError):
                await search(http_client, SearchType.LICENSE, "RN.1", upstream_config)
