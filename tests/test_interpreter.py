"""Tests for response interpretation and end-to-end dispatch."""

import json

import pytest

from quizcall.errors import MalformedArguments, UnknownFunction
from quizcall.functions import QuizStore, build_registry
from quizcall.functions.quiz import QUIZ_DESCRIPTORS
from quizcall.functions.registry import FunctionRegistry
from quizcall.interpreter import Handler, get_interpreted_handler, interpret, parse_arguments
from quizcall.messages import FunctionCall, ModelResponseMessage


class RecordingClient:
    """Completion client double returning a canned message."""

    def __init__(self, message: ModelResponseMessage):
        self.message = message
        self.calls = []

    def complete(self, conversation, descriptors=None):
        self.calls.append((conversation, descriptors))
        return self.message


def make_call(name: str, arguments) -> ModelResponseMessage:
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments)
    return ModelResponseMessage(function_call=FunctionCall(name=name, arguments=arguments))


# --- Text Responses ---

class TestTextResponse:

    def test_emits_content(self, capsys):
        handler = interpret(ModelResponseMessage(content="Hello!"), FunctionRegistry())
        assert isinstance(handler, Handler)
        assert handler.dispatches is False
        handler()
        assert capsys.readouterr().out == "Hello!\n"

    def test_absent_content_emits_nothing(self, capsys):
        handler = interpret(ModelResponseMessage(), FunctionRegistry())
        handler()
        assert capsys.readouterr().out == ""

    def test_no_registry_side_effects(self, capsys):
        store = QuizStore()
        registry = build_registry(store)
        interpret(ModelResponseMessage(content="Which topic?"), registry)()
        assert store.get_quizzes() == []


# --- Function Call Responses ---

class TestFunctionCall:

    def test_positional_binding_uses_insertion_order(self):
        received = []
        reg = FunctionRegistry()
        reg.register("f", lambda *args: received.append(args))

        handler = interpret(make_call("f", '{"b": 2, "a": 1, "c": [3]}'), reg)
        assert handler.function_name == "f"
        assert received == []
        handler()
        assert received == [(2, 1, [3])]

    def test_single_object_argument(self):
        received = []
        reg = FunctionRegistry()
        reg.register("createQuiz", lambda quiz: received.append(quiz))

        handler = interpret(
            make_call("createQuiz", '{"quiz": {"name": "Py Quiz", "questions": []}}'), reg
        )
        handler()
        assert received == [{"name": "Py Quiz", "questions": []}]

    def test_handler_returns_function_result(self):
        reg = FunctionRegistry()
        reg.register("add", lambda a, b: a + b)
        assert interpret(make_call("add", {"a": 5, "b": 3}), reg)() == 8

    def test_no_arguments(self):
        reg = FunctionRegistry()
        reg.register("getQuizzes", lambda: ["q"])
        assert interpret(make_call("getQuizzes", "{}"), reg)() == ["q"]

    def test_keyword_binding(self):
        reg = FunctionRegistry()
        reg.register("sub", lambda a, b: a - b)
        handler = interpret(make_call("sub", '{"b": 1, "a": 10}'), reg, binding="keyword")
        assert handler() == 9

    def test_keyword_binding_name_mismatch_fails_on_invoke(self):
        reg = FunctionRegistry()
        reg.register("f", lambda x: x)
        handler = interpret(make_call("f", {"y": 1}), reg, binding="keyword")
        with pytest.raises(TypeError):
            handler()

    def test_unknown_binding(self):
        with pytest.raises(ValueError):
            interpret(ModelResponseMessage(content="hi"), FunctionRegistry(), binding="magic")

    def test_function_call_wins_over_content(self, capsys):
        received = []
        reg = FunctionRegistry()
        reg.register("f", lambda x: received.append(x))
        message = ModelResponseMessage(
            content="Sure, creating it.",
            function_call=FunctionCall(name="f", arguments='{"x": 1}'),
        )
        interpret(message, reg)()
        assert received == [1]
        assert capsys.readouterr().out == ""


# --- Failure Boundaries ---

class TestFailures:

    def test_unknown_function_raises_without_invocation(self):
        called = []
        reg = FunctionRegistry()
        reg.register("known", lambda: called.append(True))
        with pytest.raises(UnknownFunction) as exc_info:
            interpret(make_call("missing", "{}"), reg)
        assert exc_info.value.name == "missing"
        assert called == []

    def test_malformed_arguments_before_lookup(self):
        class LookupSpy(FunctionRegistry):
            def __init__(self):
                super().__init__()
                self.lookups = []

            def resolve(self, name):
                self.lookups.append(name)
                return super().resolve(name)

        reg = LookupSpy()
        with pytest.raises(MalformedArguments):
            interpret(make_call("missing", '{"name": "Math",'), reg)
        assert reg.lookups == []

    @pytest.mark.parametrize("payload", ["[1, 2]", '"text"', "42", "null"])
    def test_non_object_arguments(self, payload):
        reg = FunctionRegistry()
        reg.register("f", lambda *args: None)
        with pytest.raises(MalformedArguments):
            interpret(make_call("f", payload), reg)

    def test_parse_arguments_none(self):
        with pytest.raises(MalformedArguments):
            parse_arguments(None)

    def test_malformed_arguments_is_value_error(self):
        with pytest.raises(ValueError):
            parse_arguments("not json")


# --- End-to-End ---

def test_get_interpreted_handler_builds_conversation():
    registry = build_registry(QuizStore())
    client = RecordingClient(ModelResponseMessage(content="Hi"))

    get_interpreted_handler("hello", "be brief", registry, client)

    conversation, descriptors = client.calls[0]
    assert [m.to_dict() for m in conversation] == [
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "hello"},
    ]
    assert descriptors == QUIZ_DESCRIPTORS


def test_end_to_end_create_quiz():
    store = QuizStore()
    registry = FunctionRegistry()
    registry.register("createQuiz", store.create_quiz)
    registry.advertise(QUIZ_DESCRIPTORS[1])
    client = RecordingClient(make_call("createQuiz", '{"name":"Math","questions":[]}'))

    handler = get_interpreted_handler(
        user_input="create a quiz named 'Math' with no questions",
        system_message="You create quizzes.",
        registry=registry,
        client=client,
    )
    assert store.get_quizzes() == []
    handler()
    assert store.get_quizzes() == [{"name": "Math", "questions": []}]


def test_end_to_end_repeated_creates_keep_order():
    store = QuizStore()
    registry = build_registry(store)
    for name in ("A", "B", "C"):
        client = RecordingClient(make_call("createQuiz", {"name": name, "questions": []}))
        get_interpreted_handler("make one", "sys", registry, client)()
    assert [q["name"] for q in store.get_quizzes()] == ["A", "B", "C"]
