from __future__ import annotations

import pandas as pd

from ryandata_applicant_utils.lookup import CityStateLookupClient
from ryandata_applicant_utils.pandas_ext import (
    LOOKUP_FIELDS,
    ZipLookupAccessor,
    lookup_zip_series,
    register_accessor,
)
from tests.http_stubs import RecordingHandler


def test_lookup_zip_series_columns_and_values(lookup_client: CityStateLookupClient) -> None:
    series = pd.Series(["78701", "90210-1234", "bad"])

    df = lookup_zip_series(series, client=lookup_client)

    assert list(df.columns) == LOOKUP_FIELDS == ["ZipCode", "City", "State", "Error"]
    assert df.loc[0, "City"] == "Austin"
    assert df.loc[0, "State"] == "TX"
    assert df.loc[0, "Error"] is None
    assert df.loc[1, "ZipCode"] == "90210-1234"
    assert df.loc[1, "City"] == "Beverly Hills"
    assert df.loc[2, "City"] is None
    assert df.loc[2, "Error"] == "invalid zip code format"


def test_lookup_zip_series_preserves_index(lookup_client: CityStateLookupClient) -> None:
    series = pd.Series(["10001", "02101"], index=["alice", "bob"])

    df = lookup_zip_series(series, client=lookup_client)

    assert list(df.index) == ["alice", "bob"]
    assert df.loc["bob", "City"] == "Boston"


def test_missing_values_are_not_looked_up(
    lookup_client: CityStateLookupClient, recorder: RecordingHandler
) -> None:
    series = pd.Series([None, "78701", "  ", float("nan")])

    df = lookup_zip_series(series, client=lookup_client)

    assert recorder.paths == ["/us/78701"]
    for position in (0, 2, 3):
        assert df.iloc[position].isna().all()
    assert df.iloc[1]["City"] == "Austin"


def test_empty_series(lookup_client: CityStateLookupClient) -> None:
    df = lookup_zip_series(pd.Series([], dtype=object), client=lookup_client)

    assert df.empty
    assert list(df.columns) == LOOKUP_FIELDS


def test_accessor(lookup_client: CityStateLookupClient) -> None:
    register_accessor()
    register_accessor()  # registering twice is harmless

    df = pd.DataFrame({"zip": ["78701", "00000"]})
    result = df["zip"].zip.lookup(client=lookup_client)

    assert result.loc[0, "City"] == "Austin"
    assert result.loc[1, "Error"] == "HTTP request failed with status 404"


def test_accessor_wraps_series(lookup_client: CityStateLookupClient) -> None:
    accessor = ZipLookupAccessor(pd.Series(["02101"]))

    assert accessor.lookup(client=lookup_client).loc[0, "State"] == "MA"


def test_empty_cells_stay_none(lookup_client: CityStateLookupClient) -> None:
    df = lookup_zip_series(pd.Series(["78701", "bad", None]), client=lookup_client)

    assert all(dtype == object for dtype in df.dtypes)
    assert df.loc[0, "Error"] is None
    assert df.loc[1, "City"] is None
    assert df.loc[1, "State"] is None
    assert df.loc[2, "ZipCode"] is None
