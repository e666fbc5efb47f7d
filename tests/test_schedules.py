import json

import pytest

from bbcschedules.errors import FetchFailed, MissingRegion
from bbcschedules.schedules import ProgrammesSchedules

LONDON_URL = "http://www.bbc.co.uk/bbcone/programmes/schedules/london/2011/4/7/ataglance"


@pytest.fixture
def page(markup):
    return markup(
        ("06:00", "09:15", "/programmes/a", "Breakfast"),
        ("09:15", "10:00", "/programmes/b", "Homes Under the Hammer"),
    )


def test_validation_happens_at_construction(fake_fetcher):
    fetcher = fake_fetcher()
    with pytest.raises(MissingRegion):
        ProgrammesSchedules({"channel": "bbcone"}, downloader=fetcher)
    assert fetcher.urls == []


def test_get_url(fake_fetcher, fixed_today):
    schedules = ProgrammesSchedules(
        {"channel": "bbcone", "region": "london"}, downloader=fake_fetcher(), today=fixed_today
    )
    assert schedules.get_url() == LONDON_URL
    assert schedules.channel_name == "BBC One"
    assert schedules.region_name == "London"


def test_get_listings_fetches_once(fake_fetcher, fixed_today, page):
    fetcher = fake_fetcher(content=page)
    schedules = ProgrammesSchedules(
        {"channel": "bbcone", "region": "london"}, downloader=fetcher, today=fixed_today
    )

    first = schedules.get_listings()
    second = schedules.get_listings()

    assert [entry.title for entry in first] == ["Breakfast", "Homes Under the Hammer"]
    assert second is first
    assert fetcher.urls == [LONDON_URL]


def test_cached_listings_cannot_be_changed_by_caller(fake_fetcher, fixed_today, page):
    schedules = ProgrammesSchedules(
        {"channel": "bbcthree"}, downloader=fake_fetcher(content=page), today=fixed_today
    )

    listings = schedules.get_listings()
    with pytest.raises(AttributeError):
        listings.clear()

    assert len(schedules.get_listings()) == 2
    assert str(schedules).count("-------------------\n") == 2


def test_separate_objects_fetch_separately(fake_fetcher, fixed_today, page):
    fetcher = fake_fetcher(content=page)
    config = {"channel": "bbcthree"}

    ProgrammesSchedules(config, downloader=fetcher, today=fixed_today).get_listings()
    ProgrammesSchedules(config, downloader=fetcher, today=fixed_today).get_listings()

    assert len(fetcher.urls) == 2


def test_empty_page_gives_no_listings(fake_fetcher, fixed_today):
    schedules = ProgrammesSchedules(
        {"channel": "cbeebies"}, downloader=fake_fetcher(content=""), today=fixed_today
    )
    assert schedules.get_listings() == ()
    assert str(schedules) == ""


def test_fetch_failure_carries_url(fake_fetcher, fixed_today):
    url = "http://www.bbc.co.uk/bbcfour/programmes/schedules/2011/4/7/ataglance"
    fetcher = fake_fetcher(error=FetchFailed(url, status_code=500, reason="HTTP 500"))
    schedules = ProgrammesSchedules({"channel": "bbcfour"}, downloader=fetcher, today=fixed_today)

    with pytest.raises(FetchFailed) as excinfo:
        schedules.get_listings()

    assert excinfo.value.url == url


def test_plain_callable_as_fetcher(fixed_today, page):
    urls = []

    def fetch(url):
        urls.append(url)
        return page

    schedules = ProgrammesSchedules({"channel": "bbcalba"}, downloader=fetch, today=fixed_today)

    assert len(schedules.get_listings()) == 2
    assert urls == ["http://www.bbc.co.uk/bbcalba/programmes/schedules/2011/4/7/ataglance"]


def test_str_renders_listings(fake_fetcher, fixed_today, page):
    schedules = ProgrammesSchedules(
        {"channel": "bbctwo", "region": "wales", "year": 2011, "month": 4, "day": 7},
        downloader=fake_fetcher(content=page),
        today=fixed_today,
    )

    text = str(schedules)

    assert text.startswith("Start Time: 06:00\nEnd Time: 09:15\nTitle: Breakfast\n")
    assert text == schedules.as_string()


def test_as_json(fake_fetcher, fixed_today, page):
    schedules = ProgrammesSchedules(
        {"channel": "bbcone", "region": "london"},
        downloader=fake_fetcher(content=page),
        today=fixed_today,
    )

    document = json.loads(schedules.as_json())

    assert document["date"] == "2011-04-07"
    assert document["region"] == "london"
    assert len(document["programmes"]) == 2


def test_repr(fake_fetcher, fixed_today):
    schedules = ProgrammesSchedules({"channel": "cbbc"}, downloader=fake_fetcher(), today=fixed_today)
    assert repr(schedules) == (
        "ProgrammesSchedules(channel='cbbc', region=None, date='2011-04-07')"
    )


def test_close_leaves_injected_downloader(fake_fetcher, fixed_today):
    fetcher = fake_fetcher()
    with ProgrammesSchedules({"channel": "cbbc"}, downloader=fetcher, today=fixed_today) as schedules:
        pass
    assert schedules.downloader is fetcher


def test_default_downloader_created_lazily(fixed_today):
    schedules = ProgrammesSchedules({"channel": "cbbc"}, today=fixed_today)
    assert schedules._downloader is None
    assert schedules.downloader is not None
    schedules.close()
    assert schedules._downloader is None
