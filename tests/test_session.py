import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

from examcreator import main as main_module
from examcreator.app.console import build_ui, report_validation_error
from examcreator.app.session_manager import SessionManager
from examcreator.config.config import Limits
from examcreator.model import FinalExam, Subject

from tests.support import FINAL_SCRIPT, ScriptedUI


class SessionManagerTests(unittest.TestCase):
    def test_full_final_session(self) -> None:
        ui = ScriptedUI(["1", "Math", *FINAL_SCRIPT, " YES ", "", "3", "2"])
        sm = SessionManager(Limits(), ui.callbacks())
        result = sm.run()

        self.assertEqual(str(sm.state.subject), "Subject: Math (ID: 1)")
        self.assertIsInstance(sm.state.subject.exam, FinalExam)
        self.assertEqual((result.earned, result.possible), (10, 15))
        self.assertEqual(ui.output[:2], ["Welcome to the Exam Creator!", "--- Subject Setup ---"])
        self.assertEqual(ui.remaining, 0)

    def test_declining_leaves_exam_ready(self) -> None:
        ui = ScriptedUI(["1", "Math", *FINAL_SCRIPT, "no"])
        sm = SessionManager(Limits(), ui.callbacks())
        self.assertIsNone(sm.run())
        self.assertEqual(ui.output[-1], "Exam is ready. You can take it later. Goodbye!")
        self.assertEqual(len(sm.state.subject.exam.questions), 2)

    def test_out_of_order_phases_raise(self) -> None:
        sm = SessionManager(Limits(), ScriptedUI([]).callbacks())
        with self.assertRaises(RuntimeError):
            sm.author()
        with self.assertRaises(RuntimeError):
            sm.administer()
        sm.state.subject = Subject(id=1, name="Math")
        with self.assertRaises(RuntimeError):
            sm.administer()

    def test_subject_id_reprompted(self) -> None:
        ui = ScriptedUI(["0", "-4", "abc", "7", "", "Bio"])
        subject = SessionManager(Limits(), ui.callbacks()).setup_subject()
        self.assertEqual((subject.id, subject.name), (7, "Bio"))
        self.assertEqual(len(ui.errors), 4)


class MainTests(unittest.TestCase):
    def test_version(self) -> None:
        buf = io.StringIO()
        with redirect_stdout(buf):
            self.assertEqual(main_module.main(["--version"]), 0)
        self.assertIn("examcreator 0.1.0", buf.getvalue())

    def test_end_of_input_aborts(self) -> None:
        buf = io.StringIO()
        with mock.patch("builtins.input", side_effect=EOFError), redirect_stdout(buf):
            self.assertEqual(main_module.main([]), 1)
        self.assertIn("Session aborted.", buf.getvalue())

    def test_console_run(self) -> None:
        lines = ["1", "Math", *FINAL_SCRIPT, "yes", "", "3", "2"]
        buf = io.StringIO()
        with mock.patch("builtins.input", side_effect=lines), redirect_stdout(buf):
            self.assertEqual(main_module.main([]), 0)
        self.assertIn("Your Grade: 10 out of 15", buf.getvalue())


class ConsoleTests(unittest.TestCase):
    def test_validation_error_stays_on_line(self) -> None:
        buf = io.StringIO()
        with redirect_stdout(buf):
            report_validation_error("bad", color=True)
            report_validation_error("bad", color=False)
        self.assertEqual(buf.getvalue(), "\033[31mbad\033[0mbad")

    def test_clear_disabled(self) -> None:
        buf = io.StringIO()
        with redirect_stdout(buf):
            build_ui(color_errors=False, clear_screen=False)["clear"]()
        self.assertEqual(buf.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
