#!/usr/bin/env python3
"""
Tree-sitter Java Declaration Indexer
------------------------------------
Parses Java code into a declaration model:
- classes, interfaces and enums with their qualified names (nested types as Outer$Inner)
- methods with overload-distinguishing signatures
- fields, one per declarator
- nested types, attached to the type that declares them

USAGE EXAMPLES
--------------
# 1) Run against an in-code sample (no files needed):
decl-index

# 2) Run against a file or a directory of .java files (recursive):
decl-index /path/to/java/project --json

DEPENDENCIES
------------
    pip install tree-sitter tree-sitter-java
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from decl_index.src.decl_index.config import default_config
from decl_index.src.decl_index.errors import GrammarLoadError
from decl_index.src.decl_index.indexer import JavaIndexer
from decl_index.src.decl_index.inputs.directory_scanning import index_path
from decl_index.src.decl_index.log_setup import configure_logging
from decl_index.src.decl_index.outputs.output import print_summary, to_json

# --- Demo main ---------------------------------------------------------------

SAMPLE_JAVA = r"""
package com.acme.demo;

import java.util.*;

public final class UserService {
    private final UserRepository repo = new UserRepository();
    private int created, deleted;

    public UserService() {
        System.out.println("UserService constructed");
    }

    public User addUser(String name) {
        repo.save(name);
        created++;
        return new User(StringUtils.trim(name));
    }

    public User addUser(String name, int age) throws IllegalArgumentException {
        return addUser(name);
    }

    public List<String> findAll() {
        return repo.findAll();
    }

    static class StringUtils {
        static String trim(String s) { return s.trim(); }
    }
}

interface UserRepository {
    int MAX_USERS = 100;
    void save(String name);
    List<String> findAll();
}

enum Role {
    ADMIN, GUEST;

    boolean canWrite() { return this == ADMIN; }
}
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decl-index",
        description="Extract classes, methods and fields from Java sources.",
    )
    parser.add_argument("path", nargs="?", help="Java file or directory (defaults to a built-in sample).")
    parser.add_argument("--package", default="", help="Package for files without a package declaration.")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a summary.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Increase log verbosity.")
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logger = configure_logging(verbose=args.verbose, log_file=args.log_file)
    config = default_config(default_package=args.package)

    try:
        indexer = JavaIndexer()
    except GrammarLoadError as e:
        logger.error("%s", e)
        return 2

    if args.path:
        results = index_path(indexer, args.path, config)
    else:
        results = {"<sample>": indexer.index_source(SAMPLE_JAVA, "<sample>", config.default_package)}

    if args.json:
        print(to_json(results))
    else:
        print_summary(results)

    failed = [path for path, result in results.items() if not result.ok]
    if failed:
        logger.warning("%d of %d file(s) failed to parse", len(failed), len(results))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
