_PLAIN_TEXT_RULE = (
    "마크업(*, -, # 등)과 코드블록은 사용하지 말고, 워드 문서처럼 평문으로 작성하세요. "
    "추가적인 소제목이나 마크업 기호(**, *, -, # 등)는 절대로 사용하지 말고, "
    "번호와 문장만 작성하세요."
)

SINGLE_COMMIT_FEEDBACK = (
    "다음 단일 커밋의 메시지와 실제 코드 변경사항(diff)을 분석하여 개선 피드백을 한국어로 "
    "제공해 주세요. 반드시 번호 매긴 리스트(1., 2., ...) 형식으로 답변하고, 다음 관점에서 "
    "분석하세요: 1) 커밋 메시지가 실제 코드 변경사항을 정확히 반영하는지, "
    "2) 코드 변경사항의 적절성과 품질, 3) 추가/삭제된 코드의 의미와 영향, "
    "4) 개선 제안사항. 마크업(*, -, # 등)과 코드블록은 사용하지 마세요."
)

SINGLE_COMMIT_SUMMARY = (
    "다음 단일 커밋의 실제 코드 변경사항(diff)을 상세히 분석하여 요약을 한국어로 제공해 주세요. "
    "반드시 번호 매긴 리스트(1., 2., ...) 형식으로 답변하고, 다음 내용을 포함하세요: "
    "1) 각 파일별 주요 변경사항 (추가/삭제/수정된 코드의 기능), 2) 변경된 함수나 클래스의 역할, "
    "3) 새로운 기능 추가나 버그 수정 여부, 4) 코드 변경의 영향도와 중요성, "
    "5) 기술적 세부사항. 실제 코드 내용을 바탕으로 구체적으로 분석하세요. " + _PLAIN_TEXT_RULE
)

MULTI_COMMIT_FEEDBACK = (
    "다음 커밋 메시지들의 명확성, 일관성, 관례 준수(Conventional Commits 등) 관점에서 "
    "개선 피드백을 한국어로 제공해 주세요. 반드시 번호 매긴 리스트(1., 2., ...) 형식으로 "
    "답변하고, 각 항목마다 구체적 이유와 개선된 예시 메시지를 포함하세요. "
    "마크업(*, -, # 등)과 코드블록은 사용하지 마세요."
)

MULTI_COMMIT_SUMMARY = (
    "다음 커밋 내역의 핵심 변경사항을 한국어로 간결하게 요약해 주세요. "
    "반드시 번호 매긴 리스트(1., 2., ...) 형식으로 답변하고, 주요 기능 추가, 버그 수정, "
    "리팩터링, 문서/빌드 변경 등으로 분류해 주세요. " + _PLAIN_TEXT_RULE
)

SINGLE_COMMIT_LABEL = "커밋 정보:"
MULTI_COMMIT_LABEL = "커밋 목록:"
