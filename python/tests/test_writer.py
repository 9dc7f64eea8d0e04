"""Tests for the rowcsv writer."""

import os
import tempfile

import pytest


@pytest.fixture
def output_path():
    """Path for a file the test writes."""
    f = tempfile.NamedTemporaryFile(suffix=".csv", delete=False)
    f.close()
    yield f.name
    os.unlink(f.name)


def read_text(path):
    with open(path, newline="") as f:
        return f.read()


class TestWriteRow:
    """Tests for Writer.write_row."""

    def test_header_then_rows(self, output_path):
        """Test that the header is written before the first row."""
        import rowcsv

        with rowcsv.Writer() as writer:
            assert writer.open(output_path)
            writer.set_column_names("id", "name", "score")
            assert writer.write_row(1, "Alice", 95.5)
            assert writer.write_row(2, "Bob", 87)

        assert read_text(output_path) == "id,name,score\n1,Alice,95.5\n2,Bob,87\n"

    def test_custom_delimiter(self, output_path):
        """Test that the delimiter is used in header and rows."""
        import rowcsv

        with rowcsv.Writer() as writer:
            writer.open(output_path, delimiter=";")
            writer.set_column_names("a", "b")
            writer.write_row("x", "y")

        assert read_text(output_path) == "a;b\nx;y\n"

    def test_arity_mismatch(self, output_path):
        """Test that a row of the wrong width is refused."""
        import rowcsv

        with rowcsv.Writer() as writer:
            writer.open(output_path)
            writer.set_column_names("a", "b")
            assert not writer.write_row(1)
            assert not writer.write_row(1, 2, 3)

        assert read_text(output_path) == ""

    def test_header_follows_refused_first_row(self, output_path):
        """Test that a refused first row leaves the header for the next one."""
        import rowcsv

        with rowcsv.Writer() as writer:
            writer.open(output_path)
            writer.set_column_names("a", "b")
            assert not writer.write_row(1)
            writer.set_column_names("a", "b", "c")
            assert writer.write_row(1, 2, 3)

        assert read_text(output_path) == "a,b,c\n1,2,3\n"

    def test_without_column_names(self, output_path):
        """Test that rows need column names."""
        import rowcsv

        with rowcsv.Writer() as writer:
            writer.open(output_path)
            assert not writer.write_row(1, 2)

        assert read_text(output_path) == ""

    def test_closed_writer(self):
        """Test that a closed writer refuses rows."""
        import rowcsv

        writer = rowcsv.Writer()
        writer.set_column_names("a")

        assert not writer.is_open
        assert not writer.write_row(1)

    def test_invalid_delimiter(self, output_path):
        """Test error for invalid delimiter."""
        import rowcsv

        with pytest.raises(ValueError, match="single character"):
            rowcsv.Writer().open(output_path, delimiter="")

    def test_open_in_missing_directory(self):
        """Test that an unwritable path reports failure."""
        import rowcsv

        writer = rowcsv.Writer()

        assert not writer.open("/nonexistent/dir/out.csv")
        assert not writer.is_open


class TestNewRow:
    """Tests for building rows column by column."""

    def test_builder_context(self, output_path):
        """Test that leaving the with block ends the line."""
        import rowcsv

        with rowcsv.Writer() as writer:
            writer.open(output_path)
            writer.set_column_names("a", "b", "c")
            with writer.new_row() as row:
                row.write_column("x")
                row.write_columns(1, 2.5)
                assert row.columns == 3

        assert read_text(output_path) == "a,b,c\nx,1,2.5\n"

    def test_explicit_flush(self, output_path):
        """Test flushing several lines from one builder."""
        import rowcsv

        with rowcsv.Writer() as writer:
            writer.open(output_path, delimiter="\t")
            writer.set_column_names("a", "b")
            row = writer.new_row()
            row.write_columns(1, 2)
            row.flush()
            assert row.columns == 0
            row.write_columns(3, 4)
            row.flush()

        assert read_text(output_path) == "a\tb\n1\t2\n3\t4\n"

    def test_flush_then_exit_writes_once(self, output_path):
        """Test that an already flushed builder adds no empty line."""
        import rowcsv

        with rowcsv.Writer() as writer:
            writer.open(output_path)
            writer.set_column_names("a")
            with writer.new_row() as row:
                row.write_column("only")
                row.flush()

        assert read_text(output_path) == "a\nonly\n"

    def test_header_written_once(self, output_path):
        """Test mixing builders and write_row keeps one header."""
        import rowcsv

        with rowcsv.Writer() as writer:
            writer.open(output_path)
            writer.set_column_names("a", "b")
            with writer.new_row() as row:
                row.write_columns(1, 2)
            writer.write_row(3, 4)

        assert read_text(output_path) == "a,b\n1,2\n3,4\n"

    def test_new_row_on_closed_writer(self):
        """Test that building a row needs an open writer."""
        import rowcsv

        with pytest.raises(rowcsv.RowCsvError):
            rowcsv.Writer().new_row()


class TestRoundTrip:
    """Tests that written files read back unchanged."""

    def test_strings_round_trip(self, output_path):
        """Test that string fields are read back identically."""
        import rowcsv

        names = ["first", "second", "third"]
        rows = [["a", "", "c d"], ["  spaced ", "x", "ünïcode"]]

        with rowcsv.Writer() as writer:
            writer.open(output_path)
            writer.set_column_names(*names)
            for row in rows:
                assert writer.write_row(*row)

        reader = rowcsv.Reader()
        assert reader.open(output_path)
        assert reader.column_names == names

        for expected in rows:
            slots = rowcsv.slots(str, str, str)
            assert reader.read_row(*slots)
            assert [slot.value for slot in slots] == expected

        assert not reader.next_row()

    def test_typed_round_trip_offset_reader(self, output_path):
        """Test typed values through the writer and an offset reader."""
        import rowcsv

        with rowcsv.Writer() as writer:
            writer.open(output_path, delimiter="|")
            writer.set_column_names("n", "x", "flag")
            writer.write_row(-12, 0.1 + 0.2, "y")

        reader = rowcsv.Reader(strategy=rowcsv.RowStrategy.OFFSET)
        reader.open(output_path, delimiter="|")
        n = rowcsv.Slot(rowcsv.FieldType.INT32)
        x = rowcsv.Slot(float)
        flag = rowcsv.Slot(rowcsv.FieldType.CHAR)

        assert reader.read_row(n, x, flag)
        assert (n.value, x.value, flag.value) == (-12, 0.1 + 0.2, "y")
