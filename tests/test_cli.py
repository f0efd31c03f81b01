"""Tests for CLI commands."""
import pytest
from pathlib import Path

from filmstore.cli import create_parser, main
from filmstore.persistence.database import SQLiteDatabase
from filmstore.persistence.mapper import FilmMapper


class TestCLIParsing:
    """Test CLI argument parsing."""

    def test_add_command(self):
        """Test add command parsing."""
        parser = create_parser()
        args = parser.parse_args(["add", "Inception", "2010", "148"])

        assert args.command == "add"
        assert args.title == "Inception"
        assert args.year == 2010
        assert args.duration == 148
        assert args.db == Path("films.sqlite")
        assert args.pattern == "data-mapper"

    def test_global_options(self):
        """Test options before the command."""
        parser = create_parser()
        args = parser.parse_args([
            "-v",
            "--db", "/tmp/x.db",
            "--pattern", "active-record",
            "--timeout", "2.5",
            "list",
        ])

        assert args.verbose is True
        assert args.db == Path("/tmp/x.db")
        assert args.pattern == "active-record"
        assert args.timeout == 2.5
        assert args.command == "list"

    def test_update_command(self):
        """Test update with partial changes."""
        parser = create_parser()
        args = parser.parse_args(["update", "1", "--duration", "150"])

        assert args.id == 1
        assert args.duration == 150
        assert args.title is None
        assert args.year is None

    def test_invalid_pattern(self):
        """Test unknown pattern is rejected by argparse."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--pattern", "gateway", "list"])


class TestCLICommands:
    """Run commands against a temporary database."""

    @pytest.fixture
    def db_path(self, tmp_path: Path) -> Path:
        return tmp_path / "films.db"

    @pytest.fixture(params=["data-mapper", "active-record"])
    def run(self, request, db_path):
        """Invoke main with the database and pattern filled in."""
        def _run(*argv: str) -> int:
            return main(["--db", str(db_path), "--pattern", request.param, *argv])
        return _run

    def stored(self, db_path: Path):
        with SQLiteDatabase(db_path) as database:
            return FilmMapper(database).find_all()

    def test_no_command_prints_help(self, capsys):
        """Test help is shown without a command."""
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_init(self, run, db_path):
        """Test init creates the table."""
        assert run("init") == 0
        assert self.stored(db_path) == []

    def test_add_and_list(self, run, db_path, capsys):
        """Test add stores a film and list shows it."""
        assert run("add", "Inception", "2010", "148") == 0
        assert run("list") == 0

        assert "Inception" in capsys.readouterr().out
        films = self.stored(db_path)
        assert [(f.id, f.title, f.year, f.duration) for f in films] == [(1, "Inception", 2010, 148)]

    def test_show(self, run, capsys):
        """Test show prints the film."""
        run("add", "Inception", "2010", "148")
        assert run("show", "1") == 0
        assert "Inception" in capsys.readouterr().out

    def test_show_missing(self, run, capsys):
        """Test show of an unknown id fails."""
        run("add", "Inception", "2010", "148")
        assert run("show", "99") == 1
        assert "Film not found" in capsys.readouterr().err

    def test_update(self, run, db_path):
        """Test update changes only the given fields."""
        run("add", "Inception", "2010", "148")
        assert run("update", "1", "--duration", "150") == 0

        film = self.stored(db_path)[0]
        assert (film.title, film.year, film.duration) == ("Inception", 2010, 150)

    def test_update_without_changes(self, run):
        """Test update with no fields is refused."""
        run("add", "Inception", "2010", "148")
        assert run("update", "1") == 1

    def test_delete(self, run, db_path):
        """Test delete removes the film."""
        run("add", "Inception", "2010", "148")
        assert run("delete", "1") == 0
        assert self.stored(db_path) == []
        assert run("show", "1") == 1

    def test_quiet_error_output(self, db_path, capsys):
        """Test quiet mode still reports errors."""
        assert main(["-q", "--db", str(db_path), "delete", "5"]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_unreachable_database(self, tmp_path, capsys):
        """Test a bad database path is reported, not raised."""
        bad = tmp_path / "missing" / "films.db"
        assert main(["--db", str(bad), "add", "Heat", "1995", "170"]) == 1
        assert "Cannot open database" in capsys.readouterr().err

    def test_markup_in_title(self, run, db_path, capsys):
        """Test titles with Rich markup are stored and echoed literally."""
        assert run("add", "[/]", "2000", "90") == 0
        assert "[/]" in capsys.readouterr().err

        assert run("update", "1", "--title", "[red]x") == 0
        assert run("show", "1") == 0
        assert "[red]x" in capsys.readouterr().out
        assert self.stored(db_path)[0].title == "[red]x"

        assert run("delete", "1") == 0
        assert "[red]x" in capsys.readouterr().err
        assert self.stored(db_path) == []

    def test_year_out_of_range(self, run, db_path, capsys):
        """Test a value SQLite cannot store is reported, not raised."""
        assert run("add", "Big", "1180591620717411303424", "90") == 1
        assert "Error" in capsys.readouterr().err
        assert self.stored(db_path) == []

    @pytest.mark.parametrize("command", [["list"], ["show", "1"], ["update", "1", "--year", "2000"], ["delete", "1"]])
    def test_missing_database_not_created(self, db_path, capsys, command):
        """Test read and change commands refuse a database that doesn't exist."""
        assert main(["--db", str(db_path), *command]) == 1
        assert "Database not found" in capsys.readouterr().err
        assert not db_path.exists()

    def test_existing_database_not_given_schema(self, db_path, capsys):
        """Test list on a database without the films table fails cleanly."""
        SQLiteDatabase(db_path).close()
        assert main(["--db", str(db_path), "list"]) == 1
        assert "no such table" in capsys.readouterr().err

    def test_invalid_timeout(self, db_path, capsys):
        """Test a non-positive timeout is rejected by the config."""
        assert main(["--db", str(db_path), "--timeout", "0", "init"]) == 1
        assert "Invalid options" in capsys.readouterr().err
        assert not db_path.exists()
