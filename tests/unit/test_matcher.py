"""Tests for AlternateSourceMatcher — candidates, checksums, reuse lookup."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from artisign.core.matcher import AlternateSourceMatcher
from artisign.core.naming import SuffixTable
from artisign.models.results import MatchKind
from artisign.models.suffixes import ArtifactSuffix


@pytest.fixture
def matcher(suffixes: list[ArtifactSuffix]) -> AlternateSourceMatcher:
    return AlternateSourceMatcher(SuffixTable(suffixes))


class TestCandidates:
    def test_same_base_and_suffix(
        self,
        matcher: AlternateSourceMatcher,
        layout: dict[str, Path],
        write_file: Callable[[Path, bytes], Path],
    ):
        source = write_file(layout["input"] / "mylib-1.1.jar", b"v")
        write_file(layout["alt_source"] / "mylib-1.0.jar", b"v")
        write_file(layout["alt_source"] / "mylib-1.0-sources.jar", b"v")
        write_file(layout["alt_source"] / "otherlib-1.0.jar", b"v")
        write_file(layout["alt_source"] / "mylib-1.0.pom", b"v")

        names = {p.name for p in matcher.candidates(source, layout["alt_source"])}
        assert names == {"mylib-1.0.jar"}

    def test_classifier_variant_matches_only_its_classifier(
        self,
        matcher: AlternateSourceMatcher,
        layout: dict[str, Path],
        write_file: Callable[[Path, bytes], Path],
    ):
        source = write_file(layout["input"] / "mylib-1.1-sources.jar", b"v")
        write_file(layout["alt_source"] / "mylib-1.0.jar", b"v")
        write_file(layout["alt_source"] / "mylib-1.0-sources.jar", b"v")

        names = [p.name for p in matcher.candidates(source, layout["alt_source"])]
        assert names == ["mylib-1.0-sources.jar"]

    def test_unrecognised_suffix_has_no_candidates(
        self,
        matcher: AlternateSourceMatcher,
        layout: dict[str, Path],
        write_file: Callable[[Path, bytes], Path],
    ):
        source = write_file(layout["input"] / "mylib-1.1.txt", b"v")
        write_file(layout["alt_source"] / "mylib-1.0.txt", b"v")
        assert matcher.candidates(source, layout["alt_source"]) == []

    def test_subdirectories_are_ignored(
        self,
        matcher: AlternateSourceMatcher,
        layout: dict[str, Path],
        write_file: Callable[[Path, bytes], Path],
    ):
        source = write_file(layout["input"] / "mylib-1.1.jar", b"v")
        (layout["alt_source"] / "mylib-1.0.jar").mkdir()
        write_file(layout["alt_source"] / "nested" / "mylib-1.0.jar", b"v")
        assert matcher.candidates(source, layout["alt_source"]) == []

    def test_missing_alternate_dir(
        self,
        matcher: AlternateSourceMatcher,
        layout: dict[str, Path],
        write_file: Callable[[Path, bytes], Path],
    ):
        source = write_file(layout["input"] / "mylib-1.1.jar", b"v")
        assert matcher.candidates(source, layout["alt_source"] / "gone") == []


class TestFindReusable:
    def test_reusable_when_equal_and_signed(
        self,
        matcher: AlternateSourceMatcher,
        layout: dict[str, Path],
        write_file: Callable[[Path, bytes], Path],
    ):
        source = write_file(layout["input"] / "mylib-1.1.jar", b"content")
        alt = write_file(layout["alt_source"] / "mylib-1.0.jar", b"content")
        signed = write_file(layout["alt_target"] / "mylib-1.0.jar", b"signed")

        result = matcher.find_reusable(source, layout["alt_source"], layout["alt_target"])
        assert result.kind == MatchKind.REUSABLE
        assert result.equal_alternate == alt
        assert result.reusable == signed

    def test_no_candidate(
        self,
        matcher: AlternateSourceMatcher,
        layout: dict[str, Path],
        write_file: Callable[[Path, bytes], Path],
    ):
        source = write_file(layout["input"] / "mylib-1.1.jar", b"content")
        result = matcher.find_reusable(source, layout["alt_source"], layout["alt_target"])
        assert result.kind == MatchKind.NO_CANDIDATE
        assert result.reusable is None

    def test_inconsistent_lists_all_candidates(
        self,
        matcher: AlternateSourceMatcher,
        layout: dict[str, Path],
        write_file: Callable[[Path, bytes], Path],
    ):
        source = write_file(layout["input"] / "mylib-1.1.jar", b"new")
        a = write_file(layout["alt_source"] / "mylib-1.0.jar", b"old")
        b = write_file(layout["alt_source"] / "mylib_0.9.jar", b"older")

        result = matcher.find_reusable(source, layout["alt_source"], layout["alt_target"])
        assert result.kind == MatchKind.INCONSISTENT
        assert set(result.candidates) == {a, b}
        assert result.equal_alternate is None

    def test_equal_among_several_candidates(
        self,
        matcher: AlternateSourceMatcher,
        layout: dict[str, Path],
        write_file: Callable[[Path, bytes], Path],
    ):
        source = write_file(layout["input"] / "mylib-1.1.jar", b"same")
        write_file(layout["alt_source"] / "mylib-0.9.jar", b"different")
        equal = write_file(layout["alt_source"] / "mylib-1.0.jar", b"same")
        write_file(layout["alt_target"] / "mylib-1.0.jar", b"signed")

        result = matcher.find_reusable(source, layout["alt_source"], layout["alt_target"])
        assert result.kind == MatchKind.REUSABLE
        assert result.equal_alternate == equal

    def test_equal_but_not_signed(
        self,
        matcher: AlternateSourceMatcher,
        layout: dict[str, Path],
        write_file: Callable[[Path, bytes], Path],
    ):
        source = write_file(layout["input"] / "mylib-1.1.jar", b"same")
        equal = write_file(layout["alt_source"] / "mylib-1.0.jar", b"same")

        result = matcher.find_reusable(source, layout["alt_source"], layout["alt_target"])
        assert result.kind == MatchKind.NOT_SIGNED
        assert result.equal_alternate == equal
        assert result.reusable is None

    def test_equal_without_alternate_target_dir(
        self,
        matcher: AlternateSourceMatcher,
        layout: dict[str, Path],
        write_file: Callable[[Path, bytes], Path],
    ):
        source = write_file(layout["input"] / "mylib-1.1.jar", b"same")
        write_file(layout["alt_source"] / "mylib-1.0.jar", b"same")
        write_file(layout["alt_target"] / "mylib-1.0.jar", b"signed")

        result = matcher.find_reusable(source, layout["alt_source"], None)
        assert result.kind == MatchKind.NOT_SIGNED

    def test_unrecognised_source_never_checksummed(
        self,
        matcher: AlternateSourceMatcher,
        layout: dict[str, Path],
    ):
        # The source does not exist: reaching the checksum step would raise.
        source = layout["input"] / "notes.txt"
        result = matcher.find_reusable(source, layout["alt_source"], layout["alt_target"])
        assert result.kind == MatchKind.NO_CANDIDATE
