"""Orchestration logic for checking a doc comments file against a manifest."""

import argparse
import logging
from typing import Any

from xmldoc_help.comment_reader import build_comment_reader
from xmldoc_help.doc_comment_store import load_doc_comments
from xmldoc_help.errors import XmlDocHelpError
from xmldoc_help.exit_code import ExitCode
from xmldoc_help.fragment_text import section_text
from xmldoc_help.identifier_encoder import encode_member
from xmldoc_help.load_config import load_config
from xmldoc_help.load_manifest import load_manifest
from xmldoc_help.warning_collector import WarningCollector

logger = logging.getLogger(__name__)


def run_check(args: argparse.Namespace) -> int:
    """Resolve every manifest entity and report missing documentation."""
    try:
        return _run(args)
    except XmlDocHelpError as e:
        logger.error("%s", e)
        return int(e.exit_code)
    except Exception:
        logger.exception("Unhandled error while checking documentation")
        return int(ExitCode.UNHANDLED_EXCEPTION)


def _run(args: argparse.Namespace) -> int:
    config = _effective_config(args)
    store = load_doc_comments(args.doc_xml)
    manifest = load_manifest(args.manifest)
    logger.info(
        "Checking %d entities against %d documented members of %s",
        len(manifest.entities),
        len(store),
        store.assembly_name or args.doc_xml,
    )

    warnings = WarningCollector(config["warnings"]["suppress"])
    reader = build_comment_reader(
        store,
        manifest.type_index,
        None if config["warnings"]["ignore_missing"] else warnings,
        cache=config["cache"]["enabled"],
        rewrite=config["crossrefs"]["rewrite"],
    )

    documented = 0
    requested: set[str] = set()
    for entity in manifest.entities:
        identifier = encode_member(entity)
        requested.add(identifier)
        comments = reader.get_comments(entity)
        if comments is None:
            print(f"{identifier}: <missing>")
            continue
        documented += 1
        summary = section_text(comments, "summary")
        if not summary and not config["warnings"]["ignore_missing"]:
            warnings(entity, "Empty <summary>.")
        print(f"{identifier}: {summary}")

    logger.info("%d of %d entities documented", documented, len(manifest.entities))
    unlisted = [i for i in store.identifiers() if i not in requested]
    if unlisted:
        logger.info("%d documented members are not in the manifest", len(unlisted))
        for identifier in unlisted:
            logger.debug("Not in manifest: %s", identifier)
    warnings.emit(as_errors=config["warnings"]["as_errors"])
    return int(ExitCode.SUCCESS)


def _effective_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load the config file and apply command-line overrides."""
    config = load_config(*(args.config or []))
    if args.strict:
        config["warnings"]["as_errors"] = True
    if args.ignore_missing:
        config["warnings"]["ignore_missing"] = True
    if args.no_cache:
        config["cache"]["enabled"] = False
    if args.no_rewrite:
        config["crossrefs"]["rewrite"] = False
    return config
