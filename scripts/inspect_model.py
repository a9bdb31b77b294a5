from __future__ import annotations

from char_ngram import LanguageModel


def main() -> None:
    text = (
        "natural language processing (nlp) is fun. "
        "start small, iterate, and learn by coding. "
    )

    lm = LanguageModel(window_length=4, seed=20)
    store = lm.train(text)

    df = store.to_frame()
    print(f"Windows: {len(store)}  entries: {len(df)}")
    print(df.sort_values("count", ascending=False).head(10).to_string(index=False))
    print()
    print(lm.generate("nlp ", 120))


if __name__ == "__main__":
    main()
