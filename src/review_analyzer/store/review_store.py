"""
Review store: TSV loading and random selection.

The reviews file is UTF-8, tab separated, with a header row that must
contain a "text" column. Rows with empty or missing text are discarded.
Fields are taken verbatim (no quote handling): review bodies routinely
contain unbalanced double quotes such as 5" screens.
"""

import csv
import io
import random
from pathlib import Path
from typing import Iterable, Iterator, Optional

import httpx
import pandas as pd
import structlog

from review_analyzer.models.review_models import Review
from review_analyzer.store.exceptions import NoReviewsLoadedError, ReviewLoadError


logger = structlog.get_logger(__name__)

TEXT_COLUMN = "text"


class ReviewStore:
    """
    Immutable collection of reviews loaded once per session.

    Attributes:
        source: Where the reviews came from (path or URL), for display/logs
    """

    def __init__(self, reviews: Iterable[Review] = (), source: Optional[str] = None):
        self._reviews: tuple[Review, ...] = tuple(reviews)
        self.source = source

    def __len__(self) -> int:
        return len(self._reviews)

    def __iter__(self) -> Iterator[Review]:
        return iter(self._reviews)

    @property
    def reviews(self) -> tuple[Review, ...]:
        return self._reviews

    def random_review(self, rng: Optional[random.Random] = None) -> Review:
        """
        Pick one review uniformly at random.

        Args:
            rng: Random source (inject a seeded Random in tests)

        Raises:
            NoReviewsLoadedError: Store is empty
        """
        if not self._reviews:
            raise NoReviewsLoadedError("Random review requested from an empty store")
        return (rng or random).choice(self._reviews)

    def __repr__(self) -> str:
        return f"ReviewStore(count={len(self)}, source={self.source!r})"


def parse_reviews(tsv_text: str) -> list[Review]:
    """
    Parse TSV text into reviews.

    Raises:
        ReviewLoadError: Empty input, unparseable header, or no "text" column
    """
    try:
        df = pd.read_csv(
            io.StringIO(tsv_text.lstrip("\ufeff")),
            sep="\t",
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,
            skip_blank_lines=True,
            on_bad_lines="skip",
        )
    except pd.errors.EmptyDataError:
        raise ReviewLoadError("Reviews file is empty", user_message="No reviews found in the TSV file")
    except pd.errors.ParserError as e:
        raise ReviewLoadError(
            "Reviews file could not be parsed",
            details={"parse_error": str(e)},
        )

    df.columns = [str(column).strip() for column in df.columns]
    if TEXT_COLUMN not in df.columns:
        raise ReviewLoadError(
            "Reviews file has no text column",
            details={"columns": list(df.columns)},
            user_message="Reviews file must contain a 'text' column",
        )

    reviews = [
        Review(text=text.strip())
        for text in df[TEXT_COLUMN].tolist()
        if isinstance(text, str) and text.strip()
    ]
    logger.info(
        "Parsed reviews",
        rows=len(df),
        reviews=len(reviews),
        discarded=len(df) - len(reviews),
    )
    return reviews


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


async def _fetch_text(source: str, http_client: Optional[httpx.AsyncClient], timeout: float) -> str:
    try:
        if http_client is not None:
            response = await http_client.get(source)
        else:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
                response = await client.get(source)
    except httpx.HTTPError as e:
        raise ReviewLoadError(
            f"Failed to fetch reviews file: {e}",
            details={"source": source, "error_type": type(e).__name__},
            user_message="Failed to fetch reviews file",
        )

    if not response.is_success:
        raise ReviewLoadError(
            f"Reviews file returned HTTP {response.status_code}",
            details={"source": source, "status": response.status_code},
            user_message=f"Failed to fetch reviews file (HTTP {response.status_code})",
        )
    return response.text


def _read_file(source: str) -> str:
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ReviewLoadError(
            "Reviews file not found",
            details={"source": source},
            user_message=f"Reviews file not found: {path.name}",
        )
    except (OSError, UnicodeDecodeError) as e:
        raise ReviewLoadError(
            f"Reviews file could not be read: {e}",
            details={"source": source, "error_type": type(e).__name__},
        )


async def load_reviews(
    source: str,
    http_client: Optional[httpx.AsyncClient] = None,
    timeout: float = 10.0,
) -> ReviewStore:
    """
    Load reviews from a path or an http(s) URL.

    Args:
        source: Filesystem path or URL of the TSV file
        http_client: Client to reuse for URL sources (tests inject a mock transport)
        timeout: Timeout for URL sources when no client is given

    Returns:
        ReviewStore (possibly empty when the file has no usable rows)

    Raises:
        ReviewLoadError: Fetch/read/parse failure
    """
    logger.info("Loading reviews", source=source)
    if _is_url(source):
        text = await _fetch_text(source, http_client, timeout)
    else:
        text = _read_file(source)
    store = ReviewStore(parse_reviews(text), source=source)
    logger.info("Reviews loaded", source=source, count=len(store))
    return store
