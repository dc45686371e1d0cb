from __future__ import annotations
import argparse
import json
from dataclasses import asdict

from .gematria import compute_greek
from .ingest import ingest
from .search import search
from .source import load_verse

def cmd_import(args: argparse.Namespace) -> int:
    try:
        ingest(
            parquet_path=args.parquet,
            data_dir=args.data_dir,
            source_dir=args.source_dir,
            books=args.books,
            url=args.url,
            force_download=args.force_download,
        )
    except Exception as e:
        print(f"Import failed: {e}", flush=True)
        return 1
    return 0

def cmd_gematria(args: argparse.Namespace) -> int:
    text = " ".join(args.text)
    g = compute_greek(text)
    if args.json:
        print(json.dumps({"text": text, "gematria": g.as_dict()}, ensure_ascii=False, indent=2))
        return 0
    print(f"{text}  =>  standard={g.standard} ordinal={g.ordinal} reduced={g.reduced}")
    return 0

def cmd_verse(args: argparse.Namespace) -> int:
    v = load_verse(args.book, args.chapter, args.verse, data_dir=args.data_dir)
    if args.json:
        print(json.dumps(v.to_dict(), ensure_ascii=False, indent=2))
        return 0
    print(v.text)
    print(f"  standard={v.gematria.standard} ordinal={v.gematria.ordinal} reduced={v.gematria.reduced}")
    for w in v.words:
        print(f"  {w.position:>3} {w.text}  {w.strongs or '-'}  {w.morph or '-'}  {w.gematria.standard}")
    return 0

def cmd_search(args: argparse.Namespace) -> int:
    value = args.value
    if value is None:
        value = getattr(compute_greek(args.text), args.system)

    hits = search(
        value=value,
        kind=args.kind,
        system=args.system,
        book=args.book,
        limit=args.limit,
        offset=args.offset,
        data_dir=args.data_dir,
    )
    if args.json:
        print(json.dumps([asdict(h) for h in hits], ensure_ascii=False, indent=2))
        return 0

    if not hits:
        print("No matches.")
        return 0

    for h in hits:
        pos_part = f" #{h.position}" if h.position else ""
        print(f"[{h.kind}{pos_part}] {h.ref}  =>  {h.gematria} ({h.system})")
        if h.match_text:
            print(f"  {h.match_text}")
        print(f"  {h.text}")
    return 0

def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn
    uvicorn.run(
        "tagnt_tr.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )
    return 0

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tagnt_tr", description="STEPBible TAGNT Textus Receptus importer and verse source")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_imp = sub.add_parser("import", help="Download TAGNT, filter to TR and write per-verse JSON")
    p_imp.add_argument("--parquet", default=None, help="Use a local parquet file instead of downloading")
    p_imp.add_argument("--data-dir", default=None, dest="data_dir", help="Output directory (default: $TAGNT_DATA_DIR)")
    p_imp.add_argument("--source-dir", default=None, dest="source_dir", help="Download cache (default: $TAGNT_SOURCE_DIR or ./source)")
    p_imp.add_argument("--url", default=None, help="Dataset URL (default: $TAGNT_PARQUET_URL or HuggingFace)")
    p_imp.add_argument("--books", nargs="*", default=None, help="Optional list of books to import")
    p_imp.add_argument("--force-download", action="store_true", dest="force_download")
    p_imp.set_defaults(func=cmd_import)

    p_g = sub.add_parser("gematria", help="Compute Greek gematria of a text")
    p_g.add_argument("text", nargs="+")
    p_g.add_argument("--json", action="store_true", help="Output JSON")
    p_g.set_defaults(func=cmd_gematria)

    p_v = sub.add_parser("verse", help="Show one imported verse")
    p_v.add_argument("book")
    p_v.add_argument("chapter", type=int)
    p_v.add_argument("verse", type=int)
    p_v.add_argument("--data-dir", default=None, dest="data_dir")
    p_v.add_argument("--json", action="store_true", help="Output JSON")
    p_v.set_defaults(func=cmd_verse)

    p_s = sub.add_parser("search", help="Search verses and words by gematria value")
    q = p_s.add_mutually_exclusive_group(required=True)
    q.add_argument("--value", type=int, help="Gematria value to search")
    q.add_argument("--text", help="Greek text: its gematria is computed, then searched")
    p_s.add_argument("--kind", choices=["verse", "word"], default=None, help="Filter kind")
    p_s.add_argument("--system", choices=["standard", "ordinal", "reduced"], default="standard")
    p_s.add_argument("--book", default=None, help="Filter by book")
    p_s.add_argument("--limit", type=int, default=50)
    p_s.add_argument("--offset", type=int, default=0)
    p_s.add_argument("--data-dir", default=None, dest="data_dir")
    p_s.add_argument("--json", action="store_true", help="Output JSON")
    p_s.set_defaults(func=cmd_search)

    p_srv = sub.add_parser("serve", help="Run FastAPI server")
    p_srv.add_argument("--host", default="127.0.0.1")
    p_srv.add_argument("--port", type=int, default=8000)
    p_srv.add_argument("--reload", action="store_true")
    p_srv.set_defaults(func=cmd_serve)

    return p

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)

if __name__ == "__main__":
    raise SystemExit(main())
