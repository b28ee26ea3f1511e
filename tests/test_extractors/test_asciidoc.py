"""Tests for AsciiDocBlockExtractor."""

import pytest

from include_block.extractors.asciidoc import AsciiDocBlockExtractor
from include_block.extractors.models import Found, NotFound


def lines_of(content: str) -> list[str]:
    return content.split('\n')


class TestAsciiDocBlockExtractor:
    """Test the AsciiDocBlockExtractor."""

    @pytest.fixture
    def extractor(self):
        return AsciiDocBlockExtractor()

    def test_no_source_blocks(self, extractor):
        """Test a document without blocks."""
        content = """This is an AsciiDoc file
with no source blocks at all.
Just plain text."""

        assert extractor.collect(lines_of(content), "example") == NotFound()

    def test_no_matching_id(self, extractor):
        """Test that a block without an id is not selected."""
        content = """Some text here.

[source,rust]
----
fn main() {}
----

More text."""

        assert extractor.collect(lines_of(content), "example") == NotFound()

    def test_source_block_with_id(self, extractor):
        """Test a source block named with an id attribute."""
        content = """Some introduction text.

[source,rust,id="example"]
----
fn main() {
    println!("Hello, world!");
}
----

Text after the block."""

        result = extractor.collect(lines_of(content), "example")

        assert result == Found(['fn main() {', '    println!("Hello, world!");', '}'])

    def test_shorthand_style_with_id(self, extractor):
        """Test the [,rust,id=...] shorthand."""
        content = """[,rust,id="example"]
----
fn test() {}
----"""

        assert extractor.collect(lines_of(content), "example") == Found(['fn test() {}'])

    def test_unquoted_id(self, extractor):
        """Test an unquoted id attribute."""
        content = """[source,rust,id=example]
----
let x = 1;
----"""

        assert extractor.collect(lines_of(content), "example") == Found(['let x = 1;'])

    def test_hash_id_shorthand(self, extractor):
        """Test the #id shorthand in the style attribute."""
        content = """[source#example,rust]
----
let y = 2;
----"""

        assert extractor.collect(lines_of(content), "example") == Found(['let y = 2;'])

    def test_block_anchor_above_attributes(self, extractor):
        """Test a block anchor on the line above the attribute list."""
        content = """[[example]]
[source,rust]
----
let z = 3;
----"""

        assert extractor.collect(lines_of(content), "example") == Found(['let z = 3;'])

    def test_attribute_id_wins_over_anchor(self, extractor):
        """Test that the attribute list id is the canonical name."""
        content = """[[anchor]]
[source,rust,id="example"]
----
let z = 3;
----"""

        assert extractor.collect(lines_of(content), "example") == Found(['let z = 3;'])
        assert extractor.collect(lines_of(content), "anchor") == NotFound()

    def test_block_title_between_metadata(self, extractor):
        """Test that a block title does not separate metadata from its block."""
        content = """[source,rust,id="example"]
.A titled listing
----
let t = 0;
----"""

        assert extractor.collect(lines_of(content), "example") == Found(['let t = 0;'])

    def test_blank_line_separates_metadata(self, extractor):
        """Test that attributes must be directly above the delimiter."""
        content = """[source,rust,id="example"]

----
let x = 1;
----"""

        assert extractor.collect(lines_of(content), "example") == NotFound()

    def test_id_with_other_attributes(self, extractor):
        """Test an id followed by other attributes."""
        content = """[,rust,id="example",role="highlight"]
----
fn with_attributes() {}
----"""

        assert extractor.collect(lines_of(content), "example") == Found(['fn with_attributes() {}'])

    def test_other_delimiters(self, extractor):
        """Test literal and example delimiters."""
        content = """[id=literal]
....
literal text
....

[id=longer]
========
example text
========"""

        assert extractor.collect(lines_of(content), "literal") == Found(['literal text'])
        assert extractor.collect(lines_of(content), "longer") == Found(['example text'])

    def test_closing_delimiter_must_match_length(self, extractor):
        """Test that a delimiter of another length is content."""
        content = """[source,rust,id="example"]
------
----
// Comment with ---- in it
let s = "----";
------"""

        result = extractor.collect(lines_of(content), "example")

        assert result == Found(['----', '// Comment with ---- in it', 'let s = "----";'])

    def test_empty_lines_within_delimiters(self, extractor):
        """Test that blank lines inside a block are kept."""
        content = """[,rust,id="example"]
----
fn first() {}

fn second() {}
----"""

        result = extractor.collect(lines_of(content), "example")

        assert result == Found(['fn first() {}', '', 'fn second() {}'])

    def test_multiple_blocks_one_match(self, extractor):
        """Test that only the named block is collected."""
        content = """[source,python,id="other"]
----
print("Not this one")
----

[,rust,id="example"]
----
println!("This is the one!");
----

[source,java]
----
System.out.println("Also not this one");
----"""

        result = extractor.collect(lines_of(content), "example")

        assert result == Found(['println!("This is the one!");'])

    def test_paragraph_block_without_delimiters(self, extractor):
        """Test a named paragraph block ending at a blank line."""
        content = """Some introduction text.

[source,rust,id="example"]
let x = 42;
let y = x + 1;

This text should not be included."""

        result = extractor.collect(lines_of(content), "example")

        assert result == Found(['let x = 42;', 'let y = x + 1;'])

    def test_paragraph_block_until_end(self, extractor):
        """Test a paragraph block running to the end of the document."""
        content = """[,rust,id="example"]
let last = true;"""

        assert extractor.collect(lines_of(content), "example") == Found(['let last = true;'])

    def test_anchor_before_prose_is_not_a_block(self, extractor):
        """Test that an anchored paragraph of prose is not code."""
        content = """[[example]]
This is prose about the example.
"""

        assert extractor.collect(lines_of(content), "example") == NotFound()

    def test_section_id_is_not_a_block(self, extractor):
        """Test that an id on a section title does not name a block."""
        content = """[#example]
== Example section

Text."""

        assert extractor.collect(lines_of(content), "example") == NotFound()

    def test_section_title_under_source_list_is_not_a_block(self, extractor):
        """Test that a section title never starts a paragraph block."""
        content = """[source,rust,id="example"]
== Heading"""

        assert extractor.collect(lines_of(content), "example") == NotFound()

    @pytest.mark.parametrize("attributes", ["[id=example]", "[quote,id=example]", ".Title\n[#example.role]"])
    def test_non_source_paragraph_is_not_a_block(self, extractor, attributes):
        """Test that only source-style attribute lists open a paragraph block."""
        content = f"""{attributes}
Not code at all."""

        assert extractor.collect(lines_of(content), "example") == NotFound()

    def test_source_shorthand_paragraph(self, extractor):
        """Test a paragraph block under the [source#id] shorthand."""
        content = """[source#example]
let p = 1;"""

        assert extractor.collect(lines_of(content), "example") == Found(['let p = 1;'])

    def test_unterminated_block_is_not_found(self, extractor):
        """Test that an unclosed delimited block never leaks content."""
        content = """[source,rust,id="example"]
----
fn partial() {"""

        assert extractor.collect(lines_of(content), "example") == NotFound()

    def test_first_match_wins(self, extractor):
        """Test that the first block with a name is returned."""
        content = """[id=example]
----
first
----

[id=example]
----
second
----"""

        assert extractor.collect(lines_of(content), "example") == Found(['first'])

    def test_block_inside_other_block_is_skipped(self, extractor):
        """Test that metadata inside another block is content, not a candidate."""
        content = """[,asciidoc]
----
[,rust,id="example"]
let m = example();
----"""

        assert extractor.collect(lines_of(content), "example") == NotFound()

    def test_language_filter(self, extractor):
        """Test filtering on the source language."""
        content = """[source,python,id="example"]
----
print("python")
----

[source,rust,id="example"]
----
println!("rust");
----"""

        assert extractor.collect(lines_of(content), "example", language="rust") == Found(['println!("rust");'])
        assert extractor.collect(lines_of(content), "example", language="python") == Found(['print("python")'])
