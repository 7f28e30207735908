from langchain_core.prompts import ChatPromptTemplate

summary_system_template = """
    You are an expert summarization assistant tasked with providing a comprehensive
    summary of video content. Include all important and relevant points. Keep the
    summary clear and concise, and leave no critical information out. The reader
    should feel confident that they have not missed anything after reading it.
    """

summary_user_template = """
    Summarize the following video content in a way that captures all critical details
    and relevant points. Focus on accuracy, clarity, and completeness. Provide a
    structured summary with key takeaways, important facts, and actionable insights.

    Content: {text}
    """

map_user_template = """
    Summarize this part of a video transcript. Keep every fact, name, number and
    argument it contains; later steps combine these partial summaries.

    Transcript part: {text}
    """

reduce_user_template = """
    Combine these partial summaries of one video into a single structured summary
    with key takeaways, important facts, and actionable insights. Do not drop any
    point that appears in the partial summaries.

    Partial summaries:
    {summaries}
    """

answer_system_template = """
    You are an expert assistant that provides accurate and detailed answers to
    questions about a video. Use ONLY the context provided by the user, which is a
    summary of the video. Do not rely on outside knowledge or earlier conversations.

    If the context doesn't contain the information needed to answer the question,
    say that the video summary does not cover it.
    """

answer_user_template = """
    Context: {context}

    Question: {question}

    Answer:"""

SUMMARY_PROMPT = ChatPromptTemplate.from_messages([
    ("system", summary_system_template),
    ("user", summary_user_template),
])

MAP_PROMPT = ChatPromptTemplate.from_messages([
    ("system", summary_system_template),
    ("user", map_user_template),
])

REDUCE_PROMPT = ChatPromptTemplate.from_messages([
    ("system", summary_system_template),
    ("user", reduce_user_template),
])

ANSWER_PROMPT = ChatPromptTemplate.from_messages([
    ("system", answer_system_template),
    ("user", answer_user_template),
])
