"""
Module for summarizing transcripts and answering questions using LLM models.
"""

from typing import List, Optional

from langchain.chat_models import init_chat_model
from langchain_core.documents import Document
from langchain_core.prompts import ChatPromptTemplate
from langchain_text_splitters import RecursiveCharacterTextSplitter

from ytsummarizer.core.interfaces import Generator
from ytsummarizer.core.prompts import ANSWER_PROMPT, MAP_PROMPT, REDUCE_PROMPT, SUMMARY_PROMPT
from ytsummarizer.exceptions import GenerationError
from ytsummarizer.models.schemas import SummaryConfig
from ytsummarizer.utils.logger import logging


class LangChainGenerator(Generator):
    """Summarizes transcripts and answers questions through a LangChain chat model."""

    def __init__(self, config: SummaryConfig, api_key: Optional[str] = None):
        """
        Initialize the chat models.

        Args:
            config: Configuration for summarization
            api_key: Groq API key
        """
        if not api_key:
            raise ValueError("Groq API key is required. Set GROQ_API_KEY in the .env file or environment.")

        self.config = config
        self.summary_llm = self._init_model(api_key, config.max_tokens)
        self.answer_llm = self._init_model(api_key, config.answer_max_tokens)
        self.text_splitter = RecursiveCharacterTextSplitter(
            chunk_size=config.chunk_size,
            chunk_overlap=config.chunk_overlap,
        )

    def _init_model(self, api_key: str, max_tokens: int):
        return init_chat_model(
            model=self.config.model,
            model_provider=self.config.provider,
            temperature=self.config.temperature,
            max_tokens=max_tokens,
            timeout=self.config.timeout,
            max_retries=0,
            api_key=api_key,
        )

    async def _generate(self, llm, prompt: ChatPromptTemplate, **variables) -> str:
        messages = prompt.format_messages(**variables)
        try:
            response = await llm.ainvoke(messages)
        except Exception as e:
            logging.error(f"Generation request failed: {str(e)}")
            raise GenerationError(f"Text generation failed: {e}", cause=e) from e

        content = getattr(response, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise GenerationError("Text generation failed: provider returned an empty response")
        return content.strip()

    def split_transcript(self, transcript: str) -> List[Document]:
        return self.text_splitter.split_documents([Document(page_content=transcript)])

    async def summarize(self, transcript: str) -> str:
        """
        Summarize a transcript.

        Short transcripts go to the model in one call. Longer ones are split,
        each part summarized, and the partial summaries combined.

        Args:
            transcript: Full transcript text

        Returns:
            Summary text
        """
        docs = self.split_transcript(transcript)

        if len(docs) <= 1:
            logging.info("Summarizing transcript in a single request")
            return await self._generate(self.summary_llm, SUMMARY_PROMPT, text=transcript)

        logging.info(f"Summarizing transcript in {len(docs)} parts")
        interim_summaries = []
        for doc in docs:
            interim_summaries.append(
                await self._generate(self.summary_llm, MAP_PROMPT, text=doc.page_content)
            )

        return await self._generate(
            self.summary_llm, REDUCE_PROMPT, summaries="\n\n".join(interim_summaries)
        )

    async def answer(self, question: str, context: str) -> str:
        logging.info("Answering question against supplied context")
        return await self._generate(self.answer_llm, ANSWER_PROMPT, question=question, context=context)
