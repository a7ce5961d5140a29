[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gptclient"
version = "0.1.0"
description = "A small synchronous client for the OpenAI REST API: models, completions, chat, edits, images, embeddings, audio, files, fine-tunes, moderations, assistants and threads."
requires-python = ">=3.10"
keywords = ["openai", "gpt", "chat", "completion", "api", "client", "rest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
gptclient-examples = "gptclient.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["gptclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
