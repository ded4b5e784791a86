#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Avalanche node config 편집기
Usage:
  subnetconf add-tracked-subnet --original-config-file-path PATH --new-config-file-path PATH
                                --subnet-id ID [--skip-prompt] [--dry-run] [--log-level {debug,info}]

Notes:
  - 원본 파일은 수정하지 않고 결과를 --new-config-file-path에 저장합니다.
  - tracked_subnets는 중복 제거 후 정렬된 콤마 목록으로 기록됩니다.
  - .toml 확장자는 TOML, 그 외는 JSON으로 읽고 씁니다.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from subnetconf.config_file import load_config, save_config
from subnetconf.errors import SubnetConfError
from subnetconf.ids import parse_id
from subnetconf.merge_subnets import merge

LOG_FORMAT = "%(asctime)s:%(name)s:%(levelname)s - %(message)s"
LOG_LEVELS = {"debug": logging.DEBUG, "info": logging.INFO}

Confirm = Callable[[str], bool]


def setup_logging(level: str = "info") -> logging.Logger:
    logging.basicConfig(format=LOG_FORMAT, level=logging.INFO)
    logger = logging.getLogger("subnetconf")
    logger.setLevel(LOG_LEVELS[level])
    return logger


def prompt_confirm(prompt: str) -> bool:
    """Ask a yes/no question on the terminal; anything but yes is no."""
    try:
        answer = input(f"{prompt} [y/N]: ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def execute(
    orig_config_file_path: str,
    new_config_file_path: str,
    subnet_id: str,
    skip_prompt: bool = False,
    dry_run: bool = False,
    confirm: Confirm = prompt_confirm,
    logger: Optional[logging.Logger] = None,
) -> Optional[Path]:
    """Add subnet_id to tracked_subnets and write the result to a new file.

    Returns the saved path, or None when the prompt was declined or dry_run
    is set. Raises InvalidIdentifier before any file is read.
    """
    log = logger or logging.getLogger("subnetconf")

    log.info("adding a subnet-id '%s' to tracked-subnets flag", subnet_id)
    converted = parse_id(subnet_id)
    log.info("validated a subnet-id '%s'", converted)

    print()
    if not skip_prompt:
        if not confirm(f"Update configuration with a tracked subnet Id '{converted}'?"):
            print(f"[SKIP] 변경 없음: {orig_config_file_path}")
            return None
    else:
        log.info("skipping prompt...")

    print(f"[LOAD] {orig_config_file_path}")
    config = load_config(orig_config_file_path)
    print(config.dumps(), end="")

    before = config.tracked_subnets
    merged = merge(before, converted)
    if merged is not None:
        config.tracked_subnets = merged
    log.debug("tracked_subnets %r -> %r", before, merged)
    if merged == before:
        log.info("subnet-id '%s' already tracked", converted)

    print(f"[UPDATE] {config.tracked_subnets}")
    print(config.dumps(), end="")

    if dry_run:
        print(f"[DRY] 저장 예정: {new_config_file_path}")
        return None

    saved = save_config(config, new_config_file_path)
    print(f"[SAVE] {saved}")
    return saved


def cmd_add_tracked_subnet(args):
    logger = setup_logging(args.log_level)
    execute(
        args.original_config_file_path,
        args.new_config_file_path,
        args.subnet_id,
        skip_prompt=args.skip_prompt,
        dry_run=args.dry_run,
        logger=logger,
    )


def build_parser():
    p = argparse.ArgumentParser(prog="subnetconf", description="Avalanche node config 편집기")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_add = sub.add_parser(
        "add-tracked-subnet",
        help="tracked subnet 추가 (덮어쓰기 없음)",
        description="avalanchego 호환 설정 파일의 tracked_subnets에 subnet ID를 추가합니다.",
    )
    sp_add.add_argument("-l", "--log-level", choices=sorted(LOG_LEVELS), default="info", help="로그 레벨")
    sp_add.add_argument("--original-config-file-path", required=True, help="원본 설정 파일 경로")
    sp_add.add_argument("--new-config-file-path", required=True, help="저장할 새 설정 파일 경로")
    sp_add.add_argument("--subnet-id", required=True, help="추가할 subnet ID (CB58)")
    sp_add.add_argument("-s", "--skip-prompt", action="store_true", help="확인 프롬프트 생략")
    sp_add.add_argument("-n", "--dry-run", action="store_true", help="저장하지 않고 결과만 출력")
    sp_add.set_defaults(func=cmd_add_tracked_subnet)

    return p


def main(argv=None):
    argv = argv or sys.argv[1:]
    p = build_parser()
    args = p.parse_args(argv)
    try:
        args.func(args)
    except SubnetConfError as exc:
        raise SystemExit(f"[ERROR] {exc}")


if __name__ == "__main__":
    main()
