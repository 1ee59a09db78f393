"""
Unit tests for journal entry balance validation and grouping.

Verifies:
- Balanced, unbalanced and one-sided entries
- Error priority: no postings, no debits, no credits, imbalance
- Grouping by journalEntryId, including the shared None bucket
- Posting DTOs and camelCase mappings are interchangeable
"""

from uuid import UUID

import pytest

from luca_schema.dtos import JournalEntryErrorCode, Posting
from luca_schema.enums import EntryType
from luca_schema.journal import (
    group_postings_by_journal_entry,
    group_transactions_by_journal_entry,
    validate_all_journal_entries,
    validate_journal_entry,
)


class TestValidateJournalEntry:
    """Tests for validate_journal_entry."""

    def test_one_debit_one_credit_balanced(self, make_posting):
        result = validate_journal_entry([
            make_posting("DEBIT", 10000, "group-1"),
            make_posting("CREDIT", 10000, "group-1"),
        ])

        assert result.is_valid is True
        assert result.total_debits == 10000
        assert result.total_credits == 10000
        assert result.difference == 0
        assert result.debit_count == 1
        assert result.credit_count == 1
        assert result.error is None
        assert result.error_code is None

    def test_split_debits_balanced(self, make_posting):
        result = validate_journal_entry([
            make_posting("DEBIT", 7500),
            make_posting("DEBIT", 2500),
            make_posting("CREDIT", 10000),
        ])

        assert result.is_valid is True
        assert result.total_debits == 10000
        assert result.total_credits == 10000
        assert result.debit_count == 2

    def test_unbalanced_reports_difference(self, make_posting):
        result = validate_journal_entry([
            make_posting("DEBIT", 10000),
            make_posting("CREDIT", 9000),
        ])

        assert result.is_valid is False
        assert result.difference == 1000
        assert "do not equal" in result.error
        assert result.error == "Debits (10000) do not equal credits (9000). Difference: 1000"
        assert result.error_code == JournalEntryErrorCode.UNBALANCED

    def test_negative_difference_when_credits_exceed(self, make_posting):
        result = validate_journal_entry([
            make_posting("DEBIT", 500),
            make_posting("CREDIT", 800),
        ])

        assert result.difference == -300
        assert result.error.endswith("Difference: -300")

    def test_no_credit_entries(self, make_posting):
        result = validate_journal_entry([
            make_posting("DEBIT", 10000),
            make_posting("DEBIT", 5000),
        ])

        assert result.is_valid is False
        assert result.error == "No credit entries found"
        assert result.error_code == JournalEntryErrorCode.NO_CREDITS
        assert result.total_debits == 15000
        assert result.credit_count == 0

    def test_no_debit_entries(self, make_posting):
        result = validate_journal_entry([make_posting("CREDIT", 10000)])

        assert result.error == "No debit entries found"
        assert result.error_code == JournalEntryErrorCode.NO_DEBITS

    def test_no_debits_wins_over_no_credits(self, make_posting):
        """Postings with no recognised side fail with the debit reason first."""
        result = validate_journal_entry([make_posting("SIDEWAYS", 100)])

        assert result.debit_count == 0
        assert result.credit_count == 0
        assert result.error_code == JournalEntryErrorCode.NO_DEBITS

    def test_empty_input(self):
        result = validate_journal_entry([])

        assert result.is_valid is False
        assert result.error == "No postings provided"
        assert result.error_code == JournalEntryErrorCode.NO_POSTINGS
        assert result.total_debits == 0
        assert result.total_credits == 0
        assert result.difference == 0
        assert result.debit_count == 0
        assert result.credit_count == 0

    def test_accepts_generator(self, make_posting):
        postings = (p for p in [make_posting("DEBIT", 1), make_posting("CREDIT", 1)])
        assert validate_journal_entry(postings).is_valid

    def test_unknown_entry_type_counted_on_neither_side(self, make_posting):
        result = validate_journal_entry([
            make_posting("DEBIT", 100),
            make_posting("CREDIT", 100),
            make_posting("TRANSFER", 999),
        ])

        assert result.is_valid is True
        assert result.total_debits == 100
        assert result.total_credits == 100

    def test_amounts_summed_as_given(self, make_posting):
        """Signed amounts are not absolute-valued."""
        result = validate_journal_entry([
            make_posting("DEBIT", -100),
            make_posting("CREDIT", -100),
        ])

        assert result.is_valid is True
        assert result.total_debits == -100

    def test_posting_dtos(self):
        result = validate_journal_entry([
            Posting(id="a", amount=2500, entry_type=EntryType.DEBIT),
            Posting(id="b", amount=2500, entry_type="CREDIT"),
        ])

        assert result.is_valid is True

    def test_enum_valued_mapping(self, make_posting):
        result = validate_journal_entry([
            make_posting(EntryType.DEBIT, 10),
            make_posting(EntryType.CREDIT, 10),
        ])
        assert result.is_valid is True

    def test_large_amounts_exact(self, make_posting):
        big = 10**20
        result = validate_journal_entry([
            make_posting("DEBIT", big),
            make_posting("DEBIT", 1),
            make_posting("CREDIT", big + 1),
        ])
        assert result.is_valid is True
        assert result.total_debits == big + 1

    def test_result_is_truthy_when_valid(self, make_posting):
        assert validate_journal_entry([
            make_posting("DEBIT", 1),
            make_posting("CREDIT", 1),
        ])
        assert not validate_journal_entry([])

    def test_does_not_log_above_debug(self, make_posting, captured_logs):
        validate_journal_entry([make_posting("DEBIT", 1)])
        validate_journal_entry([make_posting("DEBIT", 1), make_posting("CREDIT", 1)])

        levels = {r["level"] for r in captured_logs()}
        assert levels <= {"DEBUG"}


class TestJournalEntryValidationResultShape:

    def test_to_dict_valid_omits_error(self, make_posting):
        result = validate_journal_entry([
            make_posting("DEBIT", 1),
            make_posting("CREDIT", 1),
        ])
        assert result.to_dict() == {
            "isValid": True,
            "totalDebits": 1,
            "totalCredits": 1,
            "difference": 0,
            "debitCount": 1,
            "creditCount": 1,
        }

    def test_to_dict_invalid_has_error(self):
        out = validate_journal_entry([]).to_dict()
        assert out["error"] == "No postings provided"
        assert out["errorCode"] == "NO_POSTINGS"


class TestGroupPostings:
    """Tests for group_postings_by_journal_entry."""

    def test_scenario_three_buckets(self, make_posting):
        postings = [
            make_posting("DEBIT", 100, "g1"),
            make_posting("CREDIT", 100, "g1"),
            make_posting("DEBIT", 50, "g2"),
            make_posting("DEBIT", 25, None),
        ]

        groups = group_postings_by_journal_entry(postings)

        assert set(groups) == {"g1", "g2", None}
        assert len(groups["g1"]) == 2
        assert len(groups["g2"]) == 1
        assert len(groups[None]) == 1

    def test_empty_input(self):
        assert group_postings_by_journal_entry([]) == {}

    def test_single_key(self, make_posting):
        postings = [make_posting("DEBIT", 1, "g"), make_posting("CREDIT", 1, "g")]
        assert group_postings_by_journal_entry(postings) == {"g": postings}

    def test_all_ungrouped_share_one_bucket(self, make_posting):
        postings = [make_posting("DEBIT", i) for i in range(1, 5)]

        groups = group_postings_by_journal_entry(postings)

        assert list(groups) == [None]
        assert groups[None] == postings

    def test_missing_and_malformed_keys_are_ungrouped(self):
        postings = [
            {"entryType": "DEBIT", "amount": 1},
            {"entryType": "DEBIT", "amount": 2, "journalEntryId": ""},
            {"entryType": "DEBIT", "amount": 3, "journalEntryId": 42},
        ]

        groups = group_postings_by_journal_entry(postings)

        assert list(groups) == [None]
        assert len(groups[None]) == 3

    def test_uuid_keys_normalised_to_str(self, make_posting):
        key = UUID("123e4567-e89b-12d3-a456-426614174008")
        postings = [make_posting("DEBIT", 1, key), make_posting("CREDIT", 1, str(key))]

        groups = group_postings_by_journal_entry(postings)

        assert list(groups) == [str(key)]
        assert len(groups[str(key)]) == 2

    def test_first_occurrence_order_and_relative_order(self, make_posting):
        a1 = make_posting("DEBIT", 1, "a")
        b1 = make_posting("DEBIT", 2, "b")
        a2 = make_posting("CREDIT", 3, "a")
        n1 = make_posting("CREDIT", 4)
        b2 = make_posting("CREDIT", 5, "b")

        groups = group_postings_by_journal_entry([a1, b1, a2, n1, b2])

        assert list(groups) == ["a", "b", None]
        assert groups["a"] == [a1, a2]
        assert groups["b"] == [b1, b2]

    def test_posting_dtos_grouped(self):
        postings = [
            Posting(id="1", amount=1, entry_type="DEBIT", journal_entry_id="je"),
            Posting(id="2", amount=1, entry_type="CREDIT", journal_entry_id="je"),
            Posting(id="3", amount=1, entry_type="DEBIT"),
        ]
        groups = group_postings_by_journal_entry(postings)
        assert [p.id for p in groups["je"]] == ["1", "2"]
        assert [p.id for p in groups[None]] == ["3"]

    def test_transactions_alias(self):
        assert group_transactions_by_journal_entry is group_postings_by_journal_entry


class TestValidateAllJournalEntries:

    def test_one_result_per_group(self, make_posting):
        postings = [
            make_posting("DEBIT", 100, "g1"),
            make_posting("CREDIT", 100, "g1"),
            make_posting("DEBIT", 50, "g2"),
            make_posting("CREDIT", 40, "g2"),
            make_posting("DEBIT", 10),
        ]

        results = validate_all_journal_entries(postings)

        assert list(results) == ["g1", "g2", None]
        assert results["g1"].is_valid
        assert results["g2"].error_code == JournalEntryErrorCode.UNBALANCED
        assert results[None].error_code == JournalEntryErrorCode.NO_CREDITS

    def test_empty_input(self):
        assert validate_all_journal_entries([]) == {}

    def test_ungrouped_bucket_validated_as_one_entry(self, make_posting):
        """Standalone postings are validated together, so they can balance."""
        results = validate_all_journal_entries([
            make_posting("DEBIT", 10),
            make_posting("CREDIT", 10),
        ])
        assert results[None].is_valid

    @pytest.mark.parametrize("key", ["g1", None])
    def test_matches_direct_validation(self, make_posting, key):
        postings = [make_posting("DEBIT", 3, key), make_posting("CREDIT", 2, key)]
        assert validate_all_journal_entries(postings)[key] == validate_journal_entry(postings)
