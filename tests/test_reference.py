"""Tests for classifying repository references."""

from __future__ import annotations

import unittest
from pathlib import Path

from git_smart_workspace.exceptions import InvalidReferenceError
from git_smart_workspace.models import (
    RemoteUrl,
    RepoReference,
    ThreeSegment,
    TwoSegment,
    Unsupported,
    WorkspaceConfig,
)
from git_smart_workspace.reference import classify, to_reference


class ClassifyTests(unittest.TestCase):
    def test_owner_name(self) -> None:
        self.assertEqual(classify("octocat/Hello-World"), TwoSegment(owner="octocat", name="Hello-World"))

    def test_owner_name_branch(self) -> None:
        self.assertEqual(
            classify("octocat/Hello-World/feature-x"),
            ThreeSegment(owner="octocat", name="Hello-World", branch="feature-x"),
        )

    def test_dots_and_underscores_are_allowed(self) -> None:
        self.assertEqual(classify("my_org/site.io"), TwoSegment(owner="my_org", name="site.io"))

    def test_surrounding_whitespace_is_ignored(self) -> None:
        self.assertEqual(classify("  octocat/Hello-World\n"), TwoSegment(owner="octocat", name="Hello-World"))

    def test_git_remote(self) -> None:
        parsed = classify("git@github.com:octocat/Hello-World.git")

        self.assertEqual(
            parsed,
            RemoteUrl(
                url="git@github.com:octocat/Hello-World.git",
                domain="github.com",
                owner="octocat",
                name="Hello-World",
            ),
        )

    def test_gitea_remote_without_suffix(self) -> None:
        parsed = classify("gitea@git.example.org:team/tool")

        self.assertIsInstance(parsed, RemoteUrl)
        self.assertEqual((parsed.domain, parsed.owner, parsed.name), ("git.example.org", "team", "tool"))

    def test_git_remote_with_nested_path_is_invalid(self) -> None:
        with self.assertRaises(InvalidReferenceError):
            classify("git@github.com:group/sub/repo.git")

    def test_git_remote_with_dot_segments_is_invalid(self) -> None:
        for value in ("git@github.com:../repo.git", "git@github.com:octocat/..", "gitea@git.example.org:./tool"):
            with self.subTest(value=value):
                with self.assertRaises(InvalidReferenceError):
                    classify(value)

    def test_dots_inside_segments_are_allowed(self) -> None:
        self.assertEqual(classify("octocat/..hidden/v1..2"), ThreeSegment(owner="octocat", name="..hidden", branch="v1..2"))

    def test_scheme_urls_are_unsupported(self) -> None:
        parsed = classify("https://github.com/octocat/Hello-World")

        self.assertEqual(parsed, Unsupported(text="https://github.com/octocat/Hello-World", reason="url"))

    def test_free_text_is_search(self) -> None:
        self.assertEqual(classify("not a repo ref"), Unsupported(text="not a repo ref", reason="search"))

    def test_invalid_characters_in_segments(self) -> None:
        for value in ("octo cat/repo", "owner/re$po", "owner/repo/feat~1", "../x", "owner/.", "owner/repo/..", "./repo/main"):
            with self.subTest(value=value):
                with self.assertRaises(InvalidReferenceError):
                    classify(value)

    def test_wrong_segment_counts(self) -> None:
        for value in ("owner/", "/repo", "owner//branch", "a/b/c/d"):
            with self.subTest(value=value):
                with self.assertRaises(InvalidReferenceError):
                    classify(value)


class ToReferenceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.config = WorkspaceConfig(root_dir=Path("/home/me/code"))

    def test_owner_name_uses_default_domain(self) -> None:
        ref = to_reference(TwoSegment(owner="octocat", name="Hello-World"), self.config)

        self.assertEqual(ref.remote_url, "git@github.com:octocat/Hello-World.git")
        self.assertEqual(ref.domain, "github.com")
        self.assertIsNone(ref.branch)
        self.assertEqual(ref.repo_path(self.config), Path("/home/me/code/github.com/octocat/Hello-World"))

    def test_branch_is_kept(self) -> None:
        ref = to_reference(ThreeSegment(owner="octocat", name="Hello-World", branch="dev"), self.config)

        self.assertEqual(ref.branch, "dev")
        self.assertEqual(ref.owner_name, "octocat/Hello-World")

    def test_remote_url_is_kept_verbatim(self) -> None:
        parsed = RemoteUrl(url="gitea@git.example.org:team/tool.git", domain="git.example.org", owner="team", name="tool")

        ref = to_reference(parsed, self.config)

        self.assertEqual(
            ref,
            RepoReference(remote_url="gitea@git.example.org:team/tool.git", domain="git.example.org", owner="team", name="tool"),
        )
        self.assertEqual(ref.repo_path(self.config), Path("/home/me/code/git.example.org/team/tool"))

    def test_unsupported_raises(self) -> None:
        with self.assertRaises(InvalidReferenceError):
            to_reference(Unsupported(text="hello", reason="search"), self.config)


if __name__ == "__main__":
    unittest.main()
