from __future__ import annotations

from typing import TYPE_CHECKING

from ryandata_applicant_utils.models import Failure, Success

if TYPE_CHECKING:
    import pandas as pd

    from ryandata_applicant_utils.protocols import CityStateLookupProtocol

LOOKUP_FIELDS: list[str] = ["ZipCode", "City", "State", "Error"]


def _get_client(client: CityStateLookupProtocol | None) -> CityStateLookupProtocol:
    if client is not None:
        return client
    from ryandata_applicant_utils.lookup import get_lookup_client

    return get_lookup_client()


def lookup_zip_series(
    series: pd.Series,
    client: CityStateLookupProtocol | None = None,
) -> pd.DataFrame:
    """Resolve a Series of ZIP codes to city and state.

    Non-missing values are looked up concurrently with ``lookup_many``.
    Missing or blank entries produce a row of None without a lookup.

    Args:
        series: Pandas Series containing ZIP code strings.
        client: Lookup client to use. Defaults to the shared client.

    Returns:
        DataFrame with ZipCode, City, State and Error columns, indexed like
        ``series``.
    """
    import pandas as pd

    rows: list[dict[str, str | None]] = [dict.fromkeys(LOOKUP_FIELDS) for _ in range(len(series))]

    positions: list[int] = []
    zip_codes: list[str] = []
    for position, value in enumerate(series.tolist()):
        if pd.isna(value) or not str(value).strip():
            continue
        positions.append(position)
        zip_codes.append(str(value))

    if zip_codes:
        results = _get_client(client).lookup_many(zip_codes)
        for position, zip_code, result in zip(positions, zip_codes, results):
            row = rows[position]
            row["ZipCode"] = zip_code.strip()
            match result:
                case Success(value=city_state):
                    row["City"] = city_state.city
                    row["State"] = city_state.state
                case Failure(message=message):
                    row["Error"] = message

    return pd.DataFrame(rows, index=series.index, columns=LOOKUP_FIELDS, dtype=object)


class ZipLookupAccessor:
    """Pandas accessor for ZIP code lookups.

    Usage:
        >>> from ryandata_applicant_utils.pandas_ext import register_accessor
        >>> register_accessor()
        >>> df = pd.DataFrame({"zip": ["78701", "90210"]})
        >>> df["zip"].zip.lookup()
    """

    def __init__(self, pandas_obj: pd.Series) -> None:
        self._obj = pandas_obj

    def lookup(self, client: CityStateLookupProtocol | None = None) -> pd.DataFrame:
        """Resolve the ZIP codes in the Series.

        Args:
            client: Optional lookup client to use.

        Returns:
            DataFrame with ZipCode, City, State and Error columns.
        """
        return lookup_zip_series(self._obj, client=client)


def register_accessor(name: str = "zip") -> None:
    """Register the ZIP lookup accessor on pandas Series.

    After calling this, you can use:
        >>> series.zip.lookup()

    Args:
        name: Name for the accessor (default: "zip").
    """
    import pandas as pd

    if not hasattr(pd.Series, name):
        pd.api.extensions.register_series_accessor(name)(ZipLookupAccessor)
