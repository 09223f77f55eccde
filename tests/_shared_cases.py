"""Centralized HTML documents used across scanner/structure/lint tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class HtmlCase:
    name: str
    source: str
    structurally_clean: bool = True


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


COMPLETE_DOCUMENT = _dedent(
    """
    <!DOCTYPE html>
    <html lang="en">
    <head>
    <title>Home</title>
    <meta name="description" content="A small page">
    </head>
    <body>
    <h1>Welcome</h1>
    <h2>Section</h2>
    <img src="logo.png" alt="Logo">
    <label for="email">Email</label>
    <input id="email" type="email">
    </body>
    </html>
    """
)


STRUCTURE_CASES: tuple[HtmlCase, ...] = (
    HtmlCase(name="complete_document", source=COMPLETE_DOCUMENT),
    HtmlCase(name="nested_blocks", source="<div><section><p>text</p></section></div>"),
    HtmlCase(name="uppercase_names_match_lowercase_closers", source="<DIV><Span>x</SPAN></div>"),
    HtmlCase(name="void_elements_need_no_closer", source="<p>a<br>b<hr><img src='a.png' alt=''></p>"),
    HtmlCase(name="explicit_self_close", source="<div><custom-thing/><svg><path d='M0'/></svg></div>"),
    HtmlCase(name="multiline_tag", source='<a\n  href="/x"\n  class="link">go</a>\n'),
    HtmlCase(name="doctype_and_comment_text_ignored", source="<!DOCTYPE html><p>1 < 2</p>"),
    HtmlCase(name="stray_closer", source="<p>text</p></p>", structurally_clean=False),
    HtmlCase(name="crossed_closers", source="<div><span></div></span>", structurally_clean=False),
    HtmlCase(name="unclosed_at_eof", source="<div><p>text", structurally_clean=False),
    HtmlCase(name="unterminated_tag", source="<div>\n<p class=\"x\"", structurally_clean=False),
)


def case_id(case: HtmlCase) -> str:
    return case.name
