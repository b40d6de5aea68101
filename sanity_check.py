modules = [
    # Numeric / data
    "numpy","pandas","pydantic",
    # Tests
    "pytest",
    # Your local package
    "weight_ocr","weight_ocr.pipeline","weight_ocr.detection","weight_ocr.ctc",
    "weight_ocr.csv_adapter","weight_ocr.json_adapter",
]
failed=[]
for m in modules:
    try: __import__(m)
    except Exception as e: failed.append((m,str(e)))
print("="*40)
print("All required modules are importable." if not failed else "Missing/broken modules:")
for name, err in failed: print(f"  {name}: {err}")
print("="*40)
