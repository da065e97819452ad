"""picscript interpreter engine: input stack, tokenizer, options, geometry, reader."""
