from .dto import ErrorTexts, LocaleTexts

texts = LocaleTexts(
    errors=ErrorTexts(
        no_file="ファイルを選択してください",
        file_too_large="ファイルサイズは{max_mb}MB以下にしてください",
        invalid_mime_type="JPEG/PNG形式のみ対応しています",
        pixel_exceeded="画像サイズは{max_dimension}px以下にしてください",
        decode_failed="画像の読み込みに失敗しました",
        conversion_failed="画像の処理に失敗しました",
    ),
)
