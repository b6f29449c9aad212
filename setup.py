from setuptools import setup

setup(
    name="satellite_event_verdict",
    version="0.1.0",
    description="Turn vision LLM observations of satellite images into event, urgency and research verdicts.",
    author="Gilles Quentin Hacheme",
    package_dir={"": "src"},
    packages=["llms"],
    py_modules=[
        "assembler",
        "classifier",
        "classify_raw_only",
        "engine",
        "image_source",
        "main",
        "normalizer",
        "observation_parser",
        "policy",
        "prompts",
        "result_log",
        "server",
        "settings",
        "urgency",
        "vision",
    ],
    install_requires=[
        "Pillow>=11.1.0",
        "tqdm>=4.67.1",
        "openai>=1.65.2",
        "python-dotenv>=1.0.1",
        "PyYAML>=6.0.2",
        "langchain>=0.3.20",
        "langchain-openai>=0.3.8",
        "langchain-google-genai>=2.0.11",
        "Flask>=3.1.0",
    ],
    extras_require={
        "test": ["pytest>=8.3.5"],
    },
    entry_points={
        "console_scripts": [
            "label-events=main:main",
            "reanalyze-events=classify_raw_only:main",
            "serve-events=server:main",
        ]
    },
    python_requires=">=3.10",
)
