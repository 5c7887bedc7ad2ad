"""Streamlit demo for searching training content and running diagnostics."""
from __future__ import annotations

import streamlit as st

from application.diagnostics import run_diagnostics
from application.use_cases.load_corpus import load_corpus
from application.use_cases.search import search
from domain.errors import RetrievalError
from infrastructure.config import ContainerConfig, build_default_container
from ui.formatting import format_relevance, truncate_text
from ui.logging_utils import setup_logging

setup_logging()
st.set_page_config(page_title="TutorSearch Demo")


@st.cache_resource
def _container():
    return build_default_container(ContainerConfig.from_env())


container = _container()


def _search(query_text: str, limit: int):
    return search(
        query_text,
        corpus_index=container.corpus_index,
        tokenizer=container.tokenizer,
        scorer=container.scorer,
        limit=limit,
    )


st.title("TutorSearch Demo")

st.header("Corpus")
corpus_path = st.text_input("Corpus JSON file", value="data/sample_corpus.json")
if st.button("Load corpus"):
    try:
        fragments = load_corpus(corpus_path, source=container.fragment_source, corpus_index=container.corpus_index)
        st.success(f"Loaded {len(fragments)} fragments")
    except RetrievalError as exc:
        st.error(exc.message)

st.header("Search")
search_query = st.text_input("Query", value="toilet installation steps")
limit = st.number_input("Results", min_value=1, max_value=50, value=container.default_limit)
if st.button("Search"):
    try:
        for result in _search(search_query, int(limit)):
            st.write(
                {
                    "rank": result.rank,
                    "relevance": format_relevance(result.relevance),
                    "title": result.fragment.title,
                    "text": truncate_text(result.fragment.body),
                }
            )
    except RetrievalError as exc:
        st.error(exc.message)

st.header("Diagnostics")
if st.button("Run test queries"):
    st.json(run_diagnostics(_search).to_dict())
