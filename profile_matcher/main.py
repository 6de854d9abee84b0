#!/usr/bin/env python3
"""
CLI entrypoint for profile_matcher.

Modes:
- demo: built-in sample users vs employers
- match: users vs employers loaded from files or directories
- pair: detailed analysis of two texts
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from profile_matcher.core.similarity import cosine_similarity, similarity_matrix
from profile_matcher.core.tokenizer import tokenize
from profile_matcher.core.vectorizer import build_vectorizer
from profile_matcher.logging_config import setup_logging
from profile_matcher.utils.profile_loader import (
    SAMPLE_EMPLOYER_PROFILES,
    SAMPLE_USER_PROFILES,
    load_profiles,
)

logger = logging.getLogger(__name__)

SIMILARITY_FORMAT = ".6g"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def print_report(users: List[str], employers: List[str], vocab_profiles: List[str]) -> None:
    """
    Print every employer's similarity for each user, in input order.
    """
    vectorizer = build_vectorizer(vocab_profiles)
    logger.info("Vocabulary size: %d", len(vectorizer))
    user_vectors = vectorizer.transform_many(users)
    employer_vectors = vectorizer.transform_many(employers)
    scores = similarity_matrix(user_vectors, employer_vectors)

    for i in range(len(users)):
        print(f"Recommended jobs for User {i + 1}:")
        for j in range(len(employers)):
            print(f"- Employer {j + 1} (Similarity: {float(scores[i, j]):{SIMILARITY_FORMAT}})")
        print()


def run_demo() -> int:
    """
    Demo mode: sample users vs sample employers, vocabulary from the users.
    """
    print_report(SAMPLE_USER_PROFILES, SAMPLE_EMPLOYER_PROFILES, SAMPLE_USER_PROFILES)
    return 0


def run_match(users_path: Path, employers_path: Path, vocab_from: str = "users") -> int:
    """
    Match mode: profiles come from a file (one per line) or a directory of .txt files.
    """
    users = load_profiles(users_path)
    employers = load_profiles(employers_path)
    if not users:
        print(f"ERROR: no user profiles found in {users_path}")
        return 1
    if not employers:
        print(f"ERROR: no employer profiles found in {employers_path}")
        return 1
    logger.info("Loaded %d users and %d employers", len(users), len(employers))

    if vocab_from == "users":
        vocab_profiles = users
    elif vocab_from == "employers":
        vocab_profiles = employers
    else:
        vocab_profiles = users + employers
    print_report(users, employers, vocab_profiles)
    return 0


def run_pair(text1: str, text2: str) -> int:
    """
    Pair mode: similarity of two texts plus the token overlap behind it.
    """
    print("[Pair] Detailed analysis")
    vectorizer = build_vectorizer([text1, text2])
    v1 = vectorizer.transform(text1)
    v2 = vectorizer.transform(text2)
    sim = cosine_similarity(v1, v2)

    tokens1 = tokenize(text1)
    tokens2 = tokenize(text2)
    seen2 = set(tokens2)
    shared = []
    for t in tokens1:
        if t in seen2 and t not in shared:
            shared.append(t)

    print(f"Similarity (cosine): {sim:{SIMILARITY_FORMAT}}")
    print(f"Vocabulary size: {len(vectorizer)}")
    print(f"Tokens: text1={len(tokens1)} ({len(set(tokens1))} distinct), "
          f"text2={len(tokens2)} ({len(seen2)} distinct)")
    print(f"Shared tokens ({len(shared)}): {', '.join(shared) if shared else '-'}")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="profile_matcher CLI")
    p.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS, help="logging verbosity")
    sp = p.add_subparsers(dest="mode", required=True)

    sp.add_parser("demo", help="score the built-in sample profiles")

    p2 = sp.add_parser("match", help="score user profiles against employer profiles")
    p2.add_argument("--users", required=True, type=Path, help="file (one profile per line) or directory of .txt files")
    p2.add_argument("--employers", required=True, type=Path, help="file (one profile per line) or directory of .txt files")
    p2.add_argument("--vocab-from", default="users", choices=("users", "employers", "both"),
                    help="which profiles define the vocabulary")

    p3 = sp.add_parser("pair", help="detailed analysis of two texts")
    p3.add_argument("--text1", required=True)
    p3.add_argument("--text2", required=True)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    try:
        if args.mode == "demo":
            return_code = run_demo()
        elif args.mode == "match":
            return_code = run_match(args.users, args.employers, args.vocab_from)
        elif args.mode == "pair":
            return_code = run_pair(args.text1, args.text2)
        else:
            parser.print_help()
            return_code = 2
    except FileNotFoundError as e:
        print(f"ERROR: {e}")
        return_code = 1
    except Exception as e:
        logger.debug("Unhandled error in mode %s", args.mode, exc_info=True)
        print("Fatal error:", e)
        return_code = 3
    return return_code


if __name__ == "__main__":
    sys.exit(main())
