#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
tracked_subnets 값(콤마 구분 ID 목록)에 subnet ID 하나를 병합
- 기존 ID 유지, 빈 항목 제거, 중복 제거 후 오름차순 정렬
- 같은 입력이면 항상 같은 문자열 (설정 diff / 재현 가능한 배포용)
- 스크립트로 실행하면 stdin의 목록에 --subnet-id를 병합하여 stdout으로 출력
"""

import argparse
import sys
from typing import Iterable, List, Optional

SEPARATOR = ","


def split_subnets(text: Optional[str]) -> List[str]:
    """Non-empty segments of a comma-separated list, in input order."""
    if text is None:
        return []
    return [s for s in text.split(SEPARATOR) if s]


def join_subnets(ids: Iterable[str]) -> Optional[str]:
    unique = sorted({i for i in ids if i})
    if not unique:
        return None
    return SEPARATOR.join(unique)


def merge(existing: Optional[str], new_id: str) -> Optional[str]:
    """Add new_id to the existing list: deduplicated, sorted, never empty.

    Returns None when nothing is left to write (no existing entries and an
    empty new_id).
    """
    return join_subnets(split_subnets(existing) + [new_id])


def main(argv=None):
    ap = argparse.ArgumentParser(description="stdin의 tracked_subnets 목록에 subnet ID를 병합")
    ap.add_argument('--subnet-id', required=True)
    args = ap.parse_args(argv)

    existing = sys.stdin.read().strip() or None
    merged = merge(existing, args.subnet_id)
    if merged is not None:
        sys.stdout.write(merged + '\n')


if __name__ == '__main__':
    main()
