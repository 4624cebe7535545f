"""Configuration for the quiz function-calling demo."""

# Model identifiers
OPENAI_MODEL = "gpt-3.5-turbo"
OLLAMA_MODEL = "llama3.1:8b"

# Ollama API
OLLAMA_HOST = "http://localhost:11434"

# Transport timeouts (seconds)
REQUEST_TIMEOUT = 60
CONNECT_TIMEOUT = 10.0

# Let the model decide between a function call and a plain answer
FUNCTION_CALL_MODE = "auto"

# Environment variables
ENV_USER_INPUT = "QUIZCALL_USER_INPUT"
ENV_BACKEND = "QUIZCALL_BACKEND"

BACKENDS = ("openai", "ollama")
DEFAULT_BACKEND = "openai"

DEFAULT_USER_INPUT = (
    "Generate a challenging quiz with 3 questions related to Python programming"
)

SYSTEM_PROMPT_TEMPLATE = """
You are a chatbot that creates quizzes. You are fully in charge of the quiz creation process
and you have access to the following functions: {functions}.
Your responses must revolve exclusively around the functions at hand.
Absolutely no assumptions should be made regarding the values for functions.
If a user request seems even slightly ambiguous, ask for clarification before proceeding.
When faced with a question unrelated to these functions, stick to the defined scope
and concentrate solely on function-related queries.
"""

# Ollama model parameters
OLLAMA_OPTIONS = {
    "temperature": 0.0,
    "num_ctx": 4096,
}
OLLAMA_KEEP_ALIVE = "5m"
