"""
Prompt builder for inference requests.

Responsible for:
- Loading and rendering Jinja2 prompt templates (sentiment, noun count)
- Choosing the request shape per backend mode:
  classifier models get the raw review, generator models get a prompt
- Filling generation parameters and endpoint options
"""

from pathlib import Path
from typing import Optional

import structlog
from jinja2 import Environment, FileSystemLoader

from review_analyzer.models.enums import BackendMode, TaskEnum
from review_analyzer.models.inference_models import InferenceRequest


logger = structlog.get_logger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "prompts"

TEMPLATE_NAMES = {
    TaskEnum.SENTIMENT: "sentiment_prompt.txt",
    TaskEnum.NOUN_LEVEL: "noun_count_prompt.txt",
}


class PromptBuilder:
    """
    Build InferenceRequests for a review and a task.

    Handles:
    - Template rendering (Jinja2)
    - Generation parameters (max_new_tokens, temperature, return_full_text)
    - wait_for_model option
    """

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        max_new_tokens: int = 50,
        temperature: float = 0.1,
        wait_for_model: bool = False,
    ):
        """
        Initialize prompt builder.

        Args:
            templates_dir: Directory containing prompt templates (default: packaged prompts)
            max_new_tokens: Generation length cap for generator models
            temperature: Sampling temperature for generator models
            wait_for_model: Ask the endpoint to block while a cold model loads
        """
        self.templates_dir = Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR
        self.max_new_tokens = max_new_tokens
        self.temperature = temperature
        self.wait_for_model = wait_for_model

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            autoescape=False  # We're generating prompts, not HTML
        )

        try:
            self.templates = {
                task: self.jinja_env.get_template(name)
                for task, name in TEMPLATE_NAMES.items()
            }
            logger.info("Loaded prompt templates", templates_dir=str(self.templates_dir))
        except Exception as e:
            logger.error("Failed to load prompt templates", error=str(e))
            raise

    def build_prompt(self, task: TaskEnum, review_text: str) -> str:
        """Render the prompt for a task."""
        return self.templates[task].render(review_text=review_text.strip())

    def build_request(
        self,
        task: TaskEnum,
        review_text: str,
        model: str,
        mode: BackendMode,
    ) -> InferenceRequest:
        """
        Build the request for one backend attempt.

        Args:
            task: Sentiment or noun level
            review_text: Review to classify
            model: Hosted model id
            mode: CLASSIFIER sends the review text, GENERATOR sends a prompt

        Returns:
            InferenceRequest ready for the client
        """
        options = {"wait_for_model": True} if self.wait_for_model else None

        if mode == BackendMode.CLASSIFIER:
            if task != TaskEnum.SENTIMENT:
                raise ValueError(f"Classifier models only support sentiment, got {task.value}")
            return InferenceRequest(model=model, inputs=review_text, options=options)

        return InferenceRequest(
            model=model,
            inputs=self.build_prompt(task, review_text),
            parameters={
                "max_new_tokens": self.max_new_tokens,
                "temperature": self.temperature,
                # Answer only; the prompt itself must not come back in generated_text
                "return_full_text": False,
            },
            options=options,
        )
