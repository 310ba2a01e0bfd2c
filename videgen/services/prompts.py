"""
Prompt templates for script writing and visual concept extraction.
"""
from videgen.models import Language

SCRIPT_PROMPTS = {
    Language.ENGLISH: """You are an expert educational content creator. Create a clear, engaging, and informative script for a faceless explainer video about the following topic:

"{topic}"

Requirements:
- Keep it concise (30-60 seconds when read aloud)
- Use simple, clear language
- Include an engaging hook at the start
- Explain the topic step-by-step
- End with a brief conclusion
- Write in a conversational, friendly tone
- No need for "Hello" or "Welcome" - jump straight into the content

Write ONLY the script narration, no additional formatting or stage directions.""",

    Language.INDONESIAN: """Anda adalah pembuat konten edukasi yang ahli. Buatlah naskah yang jelas, menarik, dan informatif untuk video penjelasan tanpa wajah (faceless explainer video) tentang topik berikut:

"{topic}"

Ketentuan:
- Singkat dan padat (30-60 detik saat dibacakan)
- Gunakan bahasa Indonesia yang sederhana dan jelas
- Awali dengan kalimat pembuka yang menarik perhatian
- Jelaskan topik langkah demi langkah
- Akhiri dengan kesimpulan singkat
- Gunakan gaya bahasa santai dan bersahabat
- Tidak perlu "Halo" atau "Selamat datang" - langsung masuk ke isi

Tulis HANYA narasi naskah, tanpa format tambahan atau arahan panggung.""",
}

CONCEPTS_PROMPT = """Analyze this video script and extract {min_count}-{max_count} key visual concepts that would make good background images for each section, in the order they appear.

Script: "{script}"

You are an expert at analyzing scripts and identifying visual concepts. Return ONLY a JSON array of short image search queries in English, like:
["rice field with seedlings", "farmer planting rice", "mature rice plants", "rice harvest"]

Return only the JSON array, no additional text or explanation."""


def build_script_prompt(topic: str, language: Language) -> str:
    return SCRIPT_PROMPTS[language].format(topic=topic)


def build_concepts_prompt(script: str, min_count: int, max_count: int) -> str:
    return CONCEPTS_PROMPT.format(script=script, min_count=min_count, max_count=max_count)
