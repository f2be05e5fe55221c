import pytest

from modern_timeline.exceptions import MalformedDateError
from modern_timeline.model import EventExtractor
from modern_timeline.result import Page, PrintRequest, PropertyValueCollection, Subject
from modern_timeline.temporal import TimeValue


def make_collection(label: str, *values, type_id: str = "_dat"):
    return PropertyValueCollection(PrintRequest(label, type_id), values)


def make_subject(*collections):
    return Subject(Page("Some Page"), collections)


def test_no_date_collections_gives_no_event():
    subject = make_subject(make_collection("Place", "Berlin", type_id="_txt"))
    assert EventExtractor().extract(subject) is None


def test_empty_date_collection_counts_as_missing():
    subject = make_subject(make_collection("Has date"))
    assert EventExtractor().extract(subject) is None


def test_first_and_second_date_collections_are_start_and_end():
    subject = make_subject(
        make_collection("Has date", "2019-08-02"),
        make_collection("End date", "2019-08-05"),
    )
    event = EventExtractor().extract(subject)
    assert event.subject is subject
    assert event.start_date == TimeValue(2019, 8, 2)
    assert event.end_date == TimeValue(2019, 8, 5)


def test_first_value_of_a_collection_is_used():
    subject = make_subject(make_collection("Has date", "2001", "2002"))
    event = EventExtractor().extract(subject)
    assert event.start_date == TimeValue(2001)
    assert event.end_date is None


def test_first_start_collection_wins():
    subject = make_subject(
        make_collection("Has date", "1990-01-01"),
        make_collection("Has date", "1980-01-01"),
    )
    assert EventExtractor().extract(subject).start_date == TimeValue(1990, 1, 1)


def test_empty_collections_are_skipped_when_assigning_roles():
    subject = make_subject(
        make_collection("Has date"),
        make_collection("Other date", "1999-12-31"),
    )
    event = EventExtractor().extract(subject)
    assert event.start_date == TimeValue(1999, 12, 31)
    assert event.end_date is None


def test_configured_labels_take_their_roles():
    subject = make_subject(
        make_collection("Finished", "2020-06-01"),
        make_collection("Modified", "2021-01-01"),
        make_collection("Started", "2020-01-01", type_id="_txt"),
    )
    event = EventExtractor(start_label="Started", end_label="Finished").extract(subject)
    assert event.start_date == TimeValue(2020, 1, 1)
    assert event.end_date == TimeValue(2020, 6, 1)


def test_configured_end_label_does_not_become_start():
    subject = make_subject(
        make_collection("Finished", "2020-06-01"),
        make_collection("Started", "2020-01-01"),
    )
    event = EventExtractor(end_label="Finished").extract(subject)
    assert event.start_date == TimeValue(2020, 1, 1)
    assert event.end_date == TimeValue(2020, 6, 1)


def test_malformed_end_date_is_not_skipped():
    subject = make_subject(
        make_collection("Has date", "2020-01-01"),
        make_collection("End date", "2020-13-01"),
    )
    with pytest.raises(MalformedDateError):
        EventExtractor().extract(subject)
