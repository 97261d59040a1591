import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from speller.config import get_settings
from speller.errors import SpellerError
from speller.spell import SpellCorrector

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="speller", description="Statistical (Norvig) spelling corrector")
    parser.add_argument("words", nargs="*", help="Words to correct; read from stdin when omitted.")
    parser.add_argument("--corpus", type=str, default=None,
                        help="Reference text file (default: $SPELLER_CORPUS_PATH).")
    parser.add_argument("--alphabet", type=str, default=None, help="Characters used for replace/insert edits.")
    parser.add_argument("--encoding", type=str, default=None, help="Corpus file encoding.")
    parser.add_argument("--suggest", type=int, default=0, metavar="N",
                        help="Print up to N ranked suggestions instead of the single best correction.")
    parser.add_argument("--log-level", type=str, default=None)
    return parser


def _format(corrector: SpellCorrector, word: str, suggest: int) -> str:
    if suggest <= 0:
        return f"{word} -> {corrector.correction(word)}"
    ranked = corrector.suggestions(word, limit=suggest)
    if not ranked:
        return f"{word} -> (no suggestion)"
    return f"{word} -> " + ", ".join(f"{s.word} ({s.probability:.3g})" for s in ranked)


def run(corrector: SpellCorrector, words: Iterable[str], out: TextIO, suggest: int = 0) -> None:
    for word in words:
        word = word.strip()
        if word:
            print(_format(corrector, word, suggest), file=out)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        logging.basicConfig(level=(args.log_level or settings.LOG_LEVEL).upper(),
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")

        corpus = args.corpus or settings.CORPUS_PATH
        if not corpus:
            print("[error] no corpus given (use --corpus or SPELLER_CORPUS_PATH)", file=sys.stderr)
            return 2

        corrector = SpellCorrector.from_file(
            corpus,
            alphabet=args.alphabet if args.alphabet is not None else settings.ALPHABET,
            pattern=settings.TOKEN_PATTERN,
            encoding=args.encoding or settings.ENCODING,
        )
    except (SpellerError, ValueError) as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    logger.debug("Corrector ready with %d known words", len(corrector))
    run(corrector, args.words or sys.stdin, sys.stdout, suggest=args.suggest)
    return 0


if __name__ == "__main__":
    sys.exit(main())
