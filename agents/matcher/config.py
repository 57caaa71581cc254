DEFAULT_ACCEPTANCE_THRESHOLD = 3

# Returned by the scorer when either side is empty; always above any threshold.
UNUSABLE_DISTANCE = 999

# kcal for a standard serving, in declaration order (the tie-break order)
MEAL_ITEMS = [
    ("ご飯", 168),
    ("パン", 260),
    ("うどん", 330),
    ("そば", 280),
    ("ラーメン", 450),
    ("カレーライス", 700),
    ("唐揚げ", 450),
    ("生姜焼き", 520),
    ("焼き魚", 240),
    ("ハンバーグ", 680),
    ("オムライス", 680),
    ("チャーハン", 650),
    ("ステーキ", 750),
    ("サラダチキン", 120),
    ("サンドイッチ", 320),
    ("味噌汁", 60),
    ("エビチリ", 290),
    ("青椒肉絲", 330),
    ("麻婆春雨", 240),
    ("麻婆豆腐", 360),
    ("油淋鶏", 520),
    ("酢豚", 450),
    ("八宝菜", 260),
    ("海鮮炒め", 310),
    ("チャーシュー", 410),
    ("餃子", 450),
    ("小籠包", 210),
    ("坦々麺", 650),
    ("広東麺", 580),
    ("天津飯", 720),
    ("中華丼", 690),
    ("冷やし中華", 520),
    ("皿うどん", 690),
    ("焼きビーフン", 430),
    ("春巻き", 300),
    ("肉まん", 230),

    # Western
    ("カルボナーラ", 780),
    ("明太子パスタ", 620),
    ("ペペロンチーノ", 520),
    ("ナポリタン", 600),
    ("ボロネーゼ", 680),
    ("ジェノベーゼ", 550),
    ("ラザニア", 720),
    ("ピザ（マルゲリータ）", 750),
    ("ピザ（ペパロニ）", 820),
    ("グラタン", 680),
    ("ドリア", 730),
    ("リゾット", 540),
    ("ミネストローネ", 190),
    ("カルツォーネ", 560),
    ("ブルスケッタ", 180),
    ("ティラミス", 330),
    ("パンナコッタ", 260),
    ("ジェラート", 210),

    # American / Mexican
    ("ハンバーガー", 350),
    ("チーズバーガー", 420),
    ("フィッシュバーガー", 390),
    ("ダブルチーズバーガー", 520),
    ("フライドポテト", 450),
    ("チキンナゲット", 290),
    ("ホットドッグ", 320),
    ("ミートパイ", 450),
    ("クラムチャウダー", 320),
    ("シーザーサラダ", 320),
    ("バーベキューリブ", 780),
    ("マッシュポテト", 240),
    ("ステーキ（200g）", 600),
    ("ケサディーヤ", 510),
    ("タコス", 450),
    ("ブリトー", 650),
    ("チリコンカン", 480),
    ("ガーリックトースト", 250),

    # Indian
    ("バターチキンカレー", 680),
    ("キーマカレー", 540),
    ("グリーンカレー", 600),
    ("レッドカレー", 620),
    ("ナン", 320),
    ("タンドリーチキン", 450),
    ("ビリヤニ", 780),
    ("サモサ", 260),
    ("ラッシー", 180),
    ("ターメリックライス", 280),

    # Southeast Asian
    ("フォー", 420),
    ("バインミー", 530),
    ("ガパオライス", 650),
    ("カオマンガイ", 560),
    ("パッタイ", 670),
    ("ミーゴレン", 700),
    ("ナシゴレン", 720),
    ("生春巻き", 180),
    ("トムヤムクン", 350),
    ("海南鶏飯", 580),

    # Sushi / rice bowls
    ("サーモン寿司", 300),
    ("マグロ寿司", 280),
    ("カリフォルニアロール", 420),
    ("鉄火丼", 510),
    ("サーモン丼", 580),
    ("漬け丼", 520),
    ("海鮮丼", 710),
    ("ねぎとろ丼", 680),
    ("ちらし寿司", 600),
    ("うな重", 780),
]

# kcal per minute of activity
EXERCISE_ITEMS = [
    ("ウォーキング", 5),
    ("ジョギング", 10),
    ("ランニング", 12),
    ("サイクリング", 8),
    ("水泳", 11),
    ("縄跳び", 13),
    ("筋トレ", 7),
    ("腹筋", 7),
    ("背筋", 6),
    ("スクワット", 8),
    ("腕立て伏せ", 7),
    ("ダンス", 7),
    ("ウォーキング（速歩）", 260),
    ("ウォーキング（ゆっくり）", 180),
    ("山登り", 580),
    ("ハイキング", 350),
    ("サイクリング（街乗り）", 360),
    ("サイクリング（高速）", 520),
    ("スケート", 430),
    ("スキー", 450),
    ("スノーボード", 420),
    ("縄跳び（ゆっくり）", 250),
    ("縄跳び（高速）", 450),
    ("ローイングマシン", 420),
    ("エアロビクス（軽め）", 330),
    ("エアロビクス（激しめ）", 520),
    ("踏み台昇降", 280),
    ("ズンバ", 480),
    ("ジャズダンス", 350),
    ("社交ダンス", 290),
    ("バレエ", 380),
    ("チアダンス", 430),

    # Mind / body
    ("ピラティス", 250),
    ("ヨガ（リラックス）", 180),
    ("ヨガ（パワー）", 300),
    ("太極拳", 230),
    ("ストレッチ", 120),
    ("呼吸法", 60),

    # Sports
    ("卓球", 260),
    ("バドミントン", 380),
    ("ドッジボール", 300),
    ("キックボクシング", 650),
    ("空手", 480),
    ("テコンドー", 520),
    ("相撲", 720),
    ("ラグビー", 650),
    ("アメフト", 700),
    ("水球", 780),

    # Water
    ("カヌー", 380),
    ("カヤック", 420),
    ("サーフィン", 250),
    ("パドリング", 320),
    ("SUP（スタンドアップパドル）", 330),
    ("ダイビング", 260),
    ("スキューバ", 300),

    # Strength
    ("筋トレ（腹筋）", 180),
    ("筋トレ（背筋）", 190),
    ("筋トレ（腕立て）", 240),
    ("筋トレ（スクワット）", 260),
    ("ダンベル（軽め）", 210),
    ("ダンベル（重め）", 340),
    ("ベンチプレス", 420),
    ("デッドリフト", 460),
    ("バーピー", 500),
    ("ジャンプスクワット", 420),

    # Daily life
    ("家事（掃除）", 180),
    ("家事（洗濯）", 130),
    ("家事（料理）", 110),
    ("買い物", 140),
    ("子供と遊ぶ", 180),
    ("犬の散歩", 160),
]
