from il2cpp_build.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
