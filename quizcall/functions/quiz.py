"""Quiz creation and listing functions."""

from typing import TypedDict

from quizcall.functions.registry import FunctionDescriptor, FunctionRegistry


class Answer(TypedDict):
    name: str
    isCorrect: bool


class Question(TypedDict):
    name: str
    answers: list[Answer]


class Quiz(TypedDict):
    name: str
    questions: list[Question]


CREATE_QUIZ_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "The name of the quiz.",
        },
        "questions": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "The name of the question.",
                    },
                    "answers": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "name": {
                                    "type": "string",
                                    "description": "The name of the answer.",
                                },
                                "isCorrect": {
                                    "type": "boolean",
                                    "description": "Whether the answer is correct.",
                                },
                            },
                            "required": ["name", "isCorrect"],
                        },
                    },
                },
                "required": ["name", "answers"],
            },
        },
    },
    "required": ["name", "questions"],
}

QUIZ_DESCRIPTORS = [
    FunctionDescriptor(
        name="getQuizzes",
        description="Get all quizzes",
    ),
    FunctionDescriptor(
        name="createQuiz",
        description="Create a new quiz",
        parameters=CREATE_QUIZ_SCHEMA,
    ),
]


class QuizStore:
    """Append-only, in-memory list of quizzes for a single run."""

    def __init__(self):
        self._quizzes: list[Quiz] = []

    def create_quiz(self, name: str, questions: list[Question]) -> None:
        self._quizzes.append({"name": name, "questions": questions})

    def get_quizzes(self) -> list[Quiz]:
        return list(self._quizzes)

    def __len__(self) -> int:
        return len(self._quizzes)


def register(registry: FunctionRegistry, store: QuizStore):
    registry.register("getQuizzes", store.get_quizzes)
    registry.register("createQuiz", store.create_quiz)
    for descriptor in QUIZ_DESCRIPTORS:
        registry.advertise(descriptor)
