import unittest
from datetime import timedelta

from examcreator.config.config import Limits
from examcreator.model import FinalExam, MCQQuestion, PracticalExam, Subject, TrueOrFalseQuestion

from tests.support import FINAL_SCRIPT, ScriptedUI


class AuthoringTests(unittest.TestCase):
    def test_final_exam(self) -> None:
        subject = Subject(id=1, name="Math")
        ui = ScriptedUI(FINAL_SCRIPT)
        subject.create_exam(ui.callbacks(), Limits())

        exam = subject.exam
        self.assertIsInstance(exam, FinalExam)
        self.assertEqual(exam.duration, timedelta(minutes=30))
        self.assertEqual(exam.question_count, 2)
        q1, q2 = exam.questions
        self.assertIsInstance(q1, MCQQuestion)
        self.assertEqual([a.text for a in q1.answers], ["2", "3", "4"])
        self.assertEqual(q1.correct_answer.text, "4")
        self.assertEqual(q1.mark, 10)
        self.assertIsInstance(q2, TrueOrFalseQuestion)
        self.assertEqual(q2.correct_answer.text, "True")
        self.assertEqual(ui.remaining, 0)
        self.assertIn("\n--- Creating Exam for Math ---", ui.output)
        self.assertIn("Current Choices:", ui.output)
        self.assertEqual(ui.output[-1], "\nExam created successfully!")

    def test_practical_exam_forces_mcq(self) -> None:
        subject = Subject(id=2, name="Chem")
        ui = ScriptedUI(["2", "15", "1", "Pick A", "20", "2", "A", "B", "1"])
        subject.create_exam(ui.callbacks(), Limits())

        self.assertIsInstance(subject.exam, PracticalExam)
        self.assertIsInstance(subject.exam.questions[0], MCQQuestion)
        self.assertIn("Practical exams only support MCQ questions.", ui.output)
        self.assertNotIn("Choose Question Type:\n1. True or False\n2. MCQ (Multiple Choice)", ui.output)
        self.assertEqual(ui.remaining, 0)

    def test_bad_input_is_reprompted(self) -> None:
        subject = Subject(id=3, name="Art")
        ui = ScriptedUI([
            "3", "1",           # exam type
            "0", "181", "60",   # minutes
            "51", "1",          # questions
            "x", "2",           # question type
            "", "Colour?",      # body
            "101", "1",         # mark
            "1", "11", "10",    # choices
            *[f"c{i}" for i in range(1, 11)],
            "11", "10",         # correct id
        ])
        subject.create_exam(ui.callbacks(), Limits())

        q = subject.exam.questions[0]
        self.assertEqual(len(q.answers), 10)
        self.assertEqual(q.correct_answer.text, "c10")
        self.assertEqual(len(ui.errors), 10)
        self.assertEqual(ui.remaining, 0)

    def test_menus(self) -> None:
        ui = ScriptedUI(FINAL_SCRIPT)
        Subject(id=1, name="Math").create_exam(ui.callbacks(), Limits())
        self.assertIn("Choose Exam Type:\n1. Final Exam\n2. Practical Exam", ui.output)
        self.assertIn("Choose Question Type:\n1. True or False\n2. MCQ (Multiple Choice)", ui.output)


if __name__ == "__main__":
    unittest.main()
