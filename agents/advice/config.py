KCAL_PER_KG = 7700
SUGGESTED_DAILY_DEFICIT = 500

# Meal rules, applied to the resolved catalog name and its calories
HIGH_CALORIE_MEAL = 700
LOW_CALORIE_MEAL = 300
NOODLE_MARKERS = ["ラーメン", "パスタ"]
FRIED_MARKERS = ["揚げ", "フライ"]

MEAL_MESSAGES = {
    "high_calorie": "高カロリーの食事です。サラダやスープを追加するとバランスが良くなります。",
    "noodle": "炭水化物が多めです。たんぱく質を意識しましょう。（ゆで卵・チキンなど）",
    "fried": "揚げ物は脂質が多いので、明日は脂質を控えると良いです。",
    "low_calorie": "カロリーが低めなので、タンパク質を少し足すと良いですね。"
}

# Daily rules on intake - burn
NET_VERY_HIGH = 800
NET_HIGH = 300
NET_LOW = -300
HIGH_INTAKE = 2000
LOW_INTAKE = 1200
LOW_BURN = 200

DAILY_MESSAGES = {
    "goal_reached": "素晴らしい！目標体重を達成済みまたは目標を下回っています。維持のためにバランスの良い食事を心がけましょう。",
    "to_goal": "目標まで {diff} kg。およそ {kcal_needed} kcal のカロリー削減が必要です。標準的には一日あたり約 {deficit} kcal の赤字を作ると約 {days} 日で到達します（目安）。",
    "no_weight": "体重データまたは目標体重が未設定です。プロフィール画面で目標体重を入力してください。",
    "summary": "本日の摂取: {intake} kcal、消費: {burn} kcal（差し引き: {net} kcal）。",
    "net_very_high": "今日の差し引きが大きいです。夕食を軽めにする・間食を控えると良いでしょう。",
    "net_high": "少し多めの摂取です。軽めの運動（20〜30分のウォーキング等）をおすすめします。",
    "net_low": "良い調整です。摂取と消費のバランスが取れています。無理のないペースで続けましょう。",
    "net_ok": "今日の摂取・消費はおおむね良好です。継続が大切です。",
    "high_intake": "今日の摂取カロリーが高めです。夕食は野菜中心にすると良いです。",
    "low_intake": "摂取カロリーが低めです。筋肉維持のためにたんぱく質を含む食事をおすすめします。",
    "low_burn": "運動量が少なめです。短時間の有酸素運動（20分）を追加すると効果的です。"
}

ADVICE_SYSTEM_PROMPT = (
    "You are a friendly health coach. Reply in Japanese with 2-4 short, "
    "practical advice lines, one per line, no preamble."
)

DAILY_ADVICE_PROMPT = """Today's record for the user:
- intake: {intake} kcal
- burned by exercise: {burn} kcal
- current weight: {current_weight} kg
- target weight: {target_weight} kg

Give advice for the rest of today."""

MEAL_ADVICE_PROMPT = """The user just ate "{name}" ({calories} kcal).
Give advice about this meal and what to eat next."""
