"""Tests for the flat export builder."""

from filmarchive.models import Actor, Author, FilmRecord, Screening, TeamMember
from filmarchive.transforms import format_block, to_export_record, to_export_records


class TestFormatBlock:
    """Tests for format_block."""

    def test_empty_list(self):
        """Test an empty block renders the none placeholder."""
        assert format_block("Actors", []) == "Actors:\n(none)"

    def test_two_entries(self):
        """Test each entry renders on its own dashed line."""
        assert format_block("Actors", ["A as X", "B"]) == "Actors:\n- A as X\n- B"


class TestToExportRecord:
    """Tests for to_export_record."""

    def test_scalar_columns(self, full_film):
        """Test film scalars become the leading columns."""
        row = to_export_record(FilmRecord.model_validate(full_film))

        assert row["film_id"] == 7
        assert row["title"] == "Close-Up"
        assert row["release_year"] == 1990
        assert row["runtime"] == "98 min"
        assert row["link"] == "https://av.example.org/7"

    def test_author_and_team_columns(self, full_film):
        """Test authors and departments become keyed columns."""
        row = to_export_record(FilmRecord.model_validate(full_film))

        assert row["filmmaker"] == "Abbas Kiarostami"
        assert row["screenwriter"] == "Abbas Kiarostami"
        assert row["image_technicians"] == "Ali Reza Zarrindast"
        assert row["film_editor"] == "Abbas Kiarostami"

    def test_column_order(self, full_film):
        """Test columns follow scalars, authors, team, then blocks."""
        row = to_export_record(FilmRecord.model_validate(full_film))

        assert list(row) == [
            "film_id",
            "title",
            "release_year",
            "runtime",
            "synopsis",
            "link",
            "filmmaker",
            "screenwriter",
            "image_technicians",
            "film_editor",
            "Actors",
            "Equipment",
            "Documents",
            "Institutions",
            "Screenings",
        ]

    def test_later_author_with_same_role_overwrites(self):
        """Test a later author with the same role replaces the earlier one."""
        record = FilmRecord(
            authors=[
                Author(role="Screenwriter", name="First"),
                Author(role="Screenwriter", name="Second"),
            ]
        )
        assert to_export_record(record)["screenwriter"] == "Second"

    def test_team_members_of_one_department_joined(self, film_record):
        """Test members of one department share a column."""
        row = to_export_record(film_record)
        assert row["image_technicians"] == "Alexander Knyazhinsky; Georgy Rerberg"
        assert row["sound_technicians"] == "Vladimir Sharun"

    def test_department_with_slash(self):
        """Test department names keep non-whitespace punctuation."""
        record = FilmRecord(production_team=[TeamMember(department="Sound/Image", name="Ann")])
        assert to_export_record(record)["sound/image"] == "Ann"

    def test_entries_without_name_or_key_skipped(self):
        """Test entries missing a name or key produce no column."""
        record = FilmRecord(
            authors=[Author(role="Filmmaker", name=""), Author(role="", name="Nobody")],
            production_team=[TeamMember(department="Sound", name="")],
        )
        row = to_export_record(record)
        assert "filmmaker" not in row
        assert "sound" not in row
        assert "" not in row

    def test_actor_block(self):
        """Test the actor block lists names with characters."""
        record = FilmRecord(
            actors=[Actor(actor_name="A", character_name="X"), Actor(actor_name="B")]
        )
        assert to_export_record(record)["Actors"] == "Actors:\n- A as X\n- B"

    def test_empty_blocks(self):
        """Test empty lists render the none placeholder."""
        row = to_export_record(FilmRecord())

        assert row["Actors"] == "Actors:\n(none)"
        assert row["Equipment"] == "Equipment:\n(none)"
        assert row["Documents"] == "Documents:\n(none)"
        assert row["Institutions"] == "Institutions:\n(none)"
        assert row["Screenings"] == "Screenings:\n(none)"

    def test_equipment_document_institution_blocks(self, film_record):
        """Test equipment, document and institution entry formats."""
        row = to_export_record(film_record)

        assert row["Equipment"] == "Equipment:\n- Arriflex 35 (35mm camera)\n- Kodak 5247"
        assert row["Documents"] == "Documents:\n- Script: https://docs.example.org/42.pdf"
        assert row["Institutions"] == "Institutions:\n- Mosfilm / Goskino"

    def test_screening_date_truncated(self, full_film):
        """Test screening dates are cut to the date part."""
        row = to_export_record(FilmRecord.model_validate(full_film))
        assert row["Screenings"] == "Screenings:\n- 1990-02-01 - Fajr (35mm)"

    def test_screening_missing_format_renders_empty(self):
        """Test a missing screening format renders as empty parentheses."""
        record = FilmRecord(
            screenings=[Screening(screening_date="2021-05-01T00:00:00Z", organizers="Fest")]
        )
        assert to_export_record(record)["Screenings"] == "Screenings:\n- 2021-05-01 - Fest ()"

    def test_heterogeneous_key_sets(self, full_film, film_detail):
        """Test records with different authors get different keys."""
        rows = to_export_records(
            [FilmRecord.model_validate(full_film), FilmRecord.model_validate(film_detail)]
        )
        assert "film_editor" in rows[0]
        assert "film_editor" not in rows[1]
        assert "sound_technicians" in rows[1]

    def test_record_not_mutated(self, film_record):
        """Test building the export row leaves the record untouched."""
        before = film_record.model_dump()
        to_export_record(film_record)
        assert film_record.model_dump() == before
