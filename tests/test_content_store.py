"""Tests for the file-based content store and its Markdown parsing."""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from dochub.content import ContentError, ContentStore
from dochub.content.markdown_parser import extract_toc, parse_document
from dochub.content.store import _StoreBuilder
from dochub.generator import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture

    from dochub.config import SiteConfig


def test_pages_are_keyed_by_relative_path(store: ContentStore) -> None:
    """Each Markdown file is stored under its path without suffix."""
    page = store.get_page(("python", "day-0"))
    assert page is not None
    assert page.title == "Python Day 0"
    assert page.description == "Start here."
    assert page.source_path == "python/day-0.md"
    assert store.get_page(["python", "day-0"]) == page
    assert store.get_page(("python", "missing")) is None


def test_title_falls_back_to_heading_then_stem(store: ContentStore) -> None:
    """Without front matter the first H1 names the page, else the file stem."""
    day_one = store.get_page(("python", "day-1"))
    notes = store.get_page(("python", "notes"))
    assert day_one is not None and notes is not None
    assert day_one.title == "Day One"
    assert not day_one.body.startswith("# Day One")
    assert notes.title == "Notes"


def test_full_flag_and_toc_metadata(store: ContentStore) -> None:
    """Front matter drives the full-bleed flag; headings feed the TOC."""
    page = store.get_page(("python", "day-10"))
    assert page is not None
    assert page.full is True
    assert [(item.title, item.anchor, item.depth) for item in page.toc] == [
        ("Wrap up", "wrap-up", 2)
    ]


def test_page_tree_follows_meta_and_natural_order(store: ContentStore) -> None:
    """Root order comes from meta.yaml; folder entries sort naturally."""
    tree = store.page_tree
    assert tree.child_names() == ["python", "javascript", "day-1"]
    python = tree.children[0]
    assert python.title == "Python Path"
    assert python.key is None
    assert python.child_names() == ["day-0", "day-1", "day-10", "notes"]
    assert python.children[0].key == ("python", "day-0")
    assert python.children[0].title == "Python Day 0"


def test_generate_params_lists_every_page(store: ContentStore) -> None:
    """Static params enumerate every stored key in navigation order."""
    params = store.generate_params()
    assert params[:4] == [
        ("python", "day-0"),
        ("python", "day-1"),
        ("python", "day-10"),
        ("python", "notes"),
    ]
    assert set(params) == {
        ("python", "day-0"),
        ("python", "day-1"),
        ("python", "day-10"),
        ("python", "notes"),
        ("javascript", "day-0"),
        ("day-1",),
    }
    assert len(store) == 6


def test_folder_index_becomes_folder_page(tmp_path: Path) -> None:
    """``index.md`` gives its folder a page and a linkable nav node."""
    (tmp_path / "mysql").mkdir()
    (tmp_path / "mysql" / "index.md").write_text("# MySQL Home\n", encoding="utf-8")
    (tmp_path / "mysql" / "day-0.md").write_text("Zero\n", encoding="utf-8")
    store = ContentStore.from_directory(tmp_path)
    folder = store.page_tree.children[0]
    assert folder.key == ("mysql",)
    assert folder.title == "MySQL Home"
    assert folder.child_names() == ["day-0"]
    assert ("mysql",) in store


def test_missing_directory_raises(tmp_path: Path) -> None:
    """Pointing the store at a missing folder fails loudly."""
    with pytest.raises(FileNotFoundError):
        ContentStore.from_directory(tmp_path / "nope")


def test_invalid_front_matter_names_the_file(tmp_path: Path) -> None:
    """Malformed front matter raises ContentError mentioning the file."""
    (tmp_path / "day-0.md").write_text("---\n- just\n- a list\n---\nBody\n", encoding="utf-8")
    with pytest.raises(ContentError, match="day-0.md"):
        ContentStore.from_directory(tmp_path)


def test_file_and_folder_with_same_name_collide(tmp_path: Path) -> None:
    """``python.md`` beside a ``python/`` folder is reported, not silently merged."""
    (tmp_path / "python").mkdir()
    (tmp_path / "python" / "day-0.md").write_text("Zero\n", encoding="utf-8")
    (tmp_path / "python.md").write_text("# Python\n", encoding="utf-8")
    message = "python and python.md both map to 'python'"
    with pytest.raises(ContentError, match=message):
        ContentStore.from_directory(tmp_path)


def test_md_and_mdx_with_same_stem_collide(tmp_path: Path) -> None:
    """Two suffixes for one page name are rejected, folder index included."""
    (tmp_path / "mysql").mkdir()
    (tmp_path / "mysql" / "index.md").write_text("A\n", encoding="utf-8")
    (tmp_path / "mysql" / "index.mdx").write_text("B\n", encoding="utf-8")
    with pytest.raises(ContentError, match="mysql/index.md and mysql/index.mdx"):
        ContentStore.from_directory(tmp_path)
    (tmp_path / "mysql" / "index.mdx").unlink()
    (tmp_path / "mysql" / "day-0.md").write_text("A\n", encoding="utf-8")
    (tmp_path / "mysql" / "day-0.mdx").write_text("B\n", encoding="utf-8")
    with pytest.raises(ContentError, match="mysql/day-0"):
        ContentStore.from_directory(tmp_path)


def test_meta_yaml_is_read_once_per_folder(
    site_config: SiteConfig, mocker: MockerFixture
) -> None:
    """Each folder's ``meta.yaml`` is parsed a single time per load."""
    spy = mocker.spy(_StoreBuilder, "_read_meta")
    ContentStore.from_directory(site_config.content_dir)
    folders = [call.args[1].name for call in spy.call_args_list]
    assert sorted(folders) == ["content", "javascript", "python"]


def test_parse_document_strips_front_matter() -> None:
    """Front matter is removed from the body handed to the renderer."""
    doc = parse_document(
        "---\ntitle: Intro\ndescription: Hi\n---\nText\n", stem="intro"
    )
    assert (doc.title, doc.description, doc.full) == ("Intro", "Hi", False)
    assert doc.body == "Text\n"


def test_toc_ignores_fenced_code_and_dedupes_anchors() -> None:
    """Comment lines in code are not headings; repeated titles get suffixes."""
    body = (
        "## Setup\n"
        "```bash\n"
        "# not a heading\n"
        "```\n"
        "## Setup\n"
        "### Deep `dive`\n"
        "##### Too deep\n"
    )
    anchors = [(item.anchor, item.depth) for item in extract_toc(body)]
    assert anchors == [("setup", 2), ("setup_1", 2), ("deep-dive", 3)]


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        ("## See [docs](https://x.io/a)\nText.\n", [("See docs", "see-docs")]),
        ("## Setup {#custom}\nText.\n", [("Setup", "custom")]),
        (
            "## Use `len()`\n\n## Use `len()`\n",
            [("Use len()", "use-len"), ("Use len()", "use-len_1")],
        ),
    ],
)
def test_toc_anchors_match_rendered_heading_ids(
    body: str, expected: list[tuple[str, str]]
) -> None:
    """Inline markup, explicit ids and duplicates shape anchors as rendered."""
    toc = extract_toc(body)
    assert [(item.title, item.anchor) for item in toc] == expected
    soup = BeautifulSoup(HtmlContentRenderer().markdown(body), "html.parser")
    rendered_ids = [tag["id"] for tag in soup.select("h2[id]")]
    assert [item.anchor for item in toc] == rendered_ids
