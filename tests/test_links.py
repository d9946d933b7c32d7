"""Tests for provider detection and link formatting."""

from __future__ import annotations

import unittest

from repo_link.exceptions import UnsupportedHostError
from repo_link.links import build_link, detect_provider, normalize_remote_url, strip_git_suffix
from repo_link.models import Provider, SelectionRange

NO_SELECTION = SelectionRange(start_line=10, end_line=11, empty=True)
MULTILINE = SelectionRange(start_line=3, end_line=7, start_column=5, end_column=2)


class DetectProviderTests(unittest.TestCase):
    def test_github_remote(self) -> None:
        self.assertIs(detect_provider("https://github.com/acme/widgets.git"), Provider.GITHUB)

    def test_matching_ignores_case(self) -> None:
        self.assertIs(detect_provider("https://GitHub.COM/acme/widgets"), Provider.GITHUB)
        self.assertIs(
            detect_provider("https://Acme.VisualStudio.com/Proj/_git/Repo"),
            Provider.AZURE_DEVOPS,
        )

    def test_dev_azure_remote(self) -> None:
        self.assertIs(
            detect_provider("https://dev.azure.com/acme/proj/_git/repo"),
            Provider.AZURE_DEVOPS,
        )

    def test_devops_checked_before_github(self) -> None:
        url = "https://acme.visualstudio.com/mirror-of-github.com/_git/repo"
        self.assertIs(detect_provider(url), Provider.AZURE_DEVOPS)

    def test_other_hosts_are_unsupported(self) -> None:
        self.assertIs(detect_provider("https://gitlab.com/acme/widgets.git"), Provider.UNSUPPORTED)
        self.assertIs(detect_provider(""), Provider.UNSUPPORTED)


class GithubLinkTests(unittest.TestCase):
    def test_pins_commit_and_single_line(self) -> None:
        link = build_link(
            Provider.GITHUB,
            "https://github.com/acme/widgets.git",
            "main",
            "abc123",
            "src/app/main.go",
            NO_SELECTION,
        )
        self.assertEqual(link, "https://github.com/acme/widgets/blob/abc123/src/app/main.go#L10")

    def test_git_suffix_is_optional(self) -> None:
        with_suffix = build_link(Provider.GITHUB, "https://github.com/o/r.git", "main", "c0ffee", "a.py", NO_SELECTION)
        without = build_link(Provider.GITHUB, "https://github.com/o/r", "main", "c0ffee", "a.py", NO_SELECTION)
        self.assertEqual(with_suffix, without)

    def test_strips_exactly_one_suffix_ignoring_case(self) -> None:
        self.assertEqual(strip_git_suffix("https://github.com/o/r.GIT"), "https://github.com/o/r")
        self.assertEqual(strip_git_suffix("https://github.com/o/r.git.git"), "https://github.com/o/r.git")
        self.assertEqual(strip_git_suffix("https://github.com/o/digit"), "https://github.com/o/digit")

    def test_multiline_selection_reports_start_line(self) -> None:
        link = build_link(Provider.GITHUB, "https://github.com/o/r", "main", "c0ffee", "a.py", MULTILINE)
        self.assertTrue(link.endswith("#L3"))

    def test_ranges_enabled_for_multiline_selection(self) -> None:
        link = build_link(
            Provider.GITHUB, "https://github.com/o/r", "main", "c0ffee", "a.py", MULTILINE, github_ranges=True
        )
        self.assertTrue(link.endswith("#L3-L7"))

    def test_ranges_enabled_without_selection_stays_single_line(self) -> None:
        link = build_link(
            Provider.GITHUB, "https://github.com/o/r", "main", "c0ffee", "a.py", NO_SELECTION, github_ranges=True
        )
        self.assertTrue(link.endswith("#L10"))

    def test_ssh_remote_becomes_https(self) -> None:
        link = build_link(Provider.GITHUB, "git@github.com:o/r.git", "main", "c0ffee", "a.py", NO_SELECTION)
        self.assertEqual(link, "https://github.com/o/r/blob/c0ffee/a.py#L10")

    def test_backslashes_become_forward_slashes(self) -> None:
        link = build_link(Provider.GITHUB, "https://github.com/o/r", "main", "c0ffee", "src\\a.py", NO_SELECTION)
        self.assertIn("/blob/c0ffee/src/a.py#", link)


class AzureDevopsLinkTests(unittest.TestCase):
    repo = "https://acme.visualstudio.com/Proj/_git/Repo"

    def test_no_selection(self) -> None:
        selection = SelectionRange(start_line=5, end_line=6, empty=True)
        link = build_link(Provider.AZURE_DEVOPS, self.repo, "main", "", "src/a.cs", selection)
        self.assertEqual(
            link,
            "https://acme.visualstudio.com/Proj/_git/Repo?path=/src/a.cs&version=GBmain"
            "&line=5&lineEnd=6&lineStartColumn=1&lineEndColumn=1",
        )

    def test_selection_columns(self) -> None:
        link = build_link(Provider.AZURE_DEVOPS, self.repo, "main", "", "a.cs", MULTILINE)
        self.assertTrue(link.endswith("&line=3&lineEnd=7&lineStartColumn=5&lineEndColumn=2"))

    def test_branch_with_slashes_is_kept_verbatim(self) -> None:
        link = build_link(Provider.AZURE_DEVOPS, self.repo, "feature/foo/bar", "", "a.cs", NO_SELECTION)
        self.assertIn("version=GBfeature/foo/bar", link)

    def test_commit_is_ignored(self) -> None:
        with_commit = build_link(Provider.AZURE_DEVOPS, self.repo, "main", "abc123", "a.cs", NO_SELECTION)
        without = build_link(Provider.AZURE_DEVOPS, self.repo, "main", "", "a.cs", NO_SELECTION)
        self.assertEqual(with_commit, without)


class BuildLinkTests(unittest.TestCase):
    def test_unsupported_provider_raises(self) -> None:
        with self.assertRaises(UnsupportedHostError) as ctx:
            build_link(Provider.UNSUPPORTED, "https://gitlab.com/o/r", "main", "c0ffee", "a.py", NO_SELECTION)
        self.assertEqual(ctx.exception.remote_url, "https://gitlab.com/o/r")

    def test_same_inputs_same_link(self) -> None:
        for provider in (Provider.GITHUB, Provider.AZURE_DEVOPS):
            args = (provider, "https://github.com/o/r.git", "dev", "c0ffee", "pkg/mod.py", MULTILINE)
            self.assertEqual(build_link(*args), build_link(*args))


class NormalizeRemoteUrlTests(unittest.TestCase):
    def test_https_unchanged(self) -> None:
        url = "https://dev.azure.com/acme/proj/_git/repo"
        self.assertEqual(normalize_remote_url(url), url)

    def test_scp_like_github(self) -> None:
        self.assertEqual(normalize_remote_url("git@github.com:acme/widgets.git"), "https://github.com/acme/widgets.git")

    def test_ssh_scheme_github(self) -> None:
        self.assertEqual(normalize_remote_url("ssh://git@github.com/acme/widgets"), "https://github.com/acme/widgets")

    def test_azure_ssh(self) -> None:
        self.assertEqual(
            normalize_remote_url("git@ssh.dev.azure.com:v3/acme/proj/repo"),
            "https://dev.azure.com/acme/proj/_git/repo",
        )

    def test_visualstudio_ssh(self) -> None:
        self.assertEqual(
            normalize_remote_url("acme@vs-ssh.visualstudio.com:v3/acme/proj/repo"),
            "https://acme.visualstudio.com/proj/_git/repo",
        )


if __name__ == "__main__":
    unittest.main()
